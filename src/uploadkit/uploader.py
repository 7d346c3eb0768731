"""
Uploader base class.

Subclasses declare their processing pipeline on the class, either with a
``processing`` attribute or by calling ``process`` after the class exists::

    class AvatarUploader(Uploader):
        processing = ("sepiatone", "vignette", {"scale": [200, 200]})

        def sepiatone(self): ...
        def vignette(self): ...
        def scale(self, height, width): ...

    AvatarUploader.process("strip_metadata")

    AvatarUploader(file).run_processors()
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from uploadkit.processing.dispatcher import run_processors
from uploadkit.processing.registry import REGISTRY_ATTR, registry_for
from uploadkit.processing.types import ProcessorEntry


class Uploader:
    """Base class for uploader types."""

    # Steps declared on the subclass's registry at class creation
    processing: ClassVar[Any] = ()

    def __init_subclass__(cls, inherit_processors: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        registry = registry_for(cls)

        if inherit_processors:
            for base in cls.__mro__[1:]:
                parent = base.__dict__.get(REGISTRY_ATTR)
                if parent is not None:
                    registry.declare(*parent.list())
                    break

        steps = cls.__dict__.get("processing")
        if steps:
            if isinstance(steps, (str, Mapping, ProcessorEntry)):
                steps = (steps,)
            registry.declare(*steps)

    def __init__(self, file: Any = None, *, model: Any = None, mounted_as: str | None = None) -> None:
        self.file = file
        self.model = model
        self.mounted_as = mounted_as

    @classmethod
    def process(cls, *steps: Any) -> None:
        """Add processing steps to this uploader type's pipeline."""
        registry_for(cls).declare(*steps)

    @classmethod
    def processors(cls) -> tuple[ProcessorEntry, ...]:
        """List the processing steps declared for this uploader type."""
        return registry_for(cls).list()

    def run_processors(self) -> None:
        """Apply every declared processing step to this uploader, in order."""
        run_processors(self, registry_for(type(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file={self.file!r})"
