"""
Tests for the Uploader base class.
"""

import pytest

from uploadkit import ProcessorEntry, Uploader


def make_uploader(**namespace):
    """Build a fresh Uploader subclass that records calls in self.calls."""

    def _recorder(name):
        def method(self, *args):
            self.calls.append((name, args))

        return method

    body = {name: _recorder(name) for name in ("a", "b", "c", "resize", "convert")}
    body.update(namespace)
    return type("RecordingUploader", (Uploader,), body)


class TestDeclaration:
    """Declaring pipelines on Uploader subclasses."""

    def test_processing_attribute(self):
        cls = make_uploader(processing=("a", {"resize": [200, 100]}))
        assert cls.processors() == (("a", ()), ("resize", (200, 100)))

    def test_processing_single_string(self):
        cls = make_uploader(processing="a")
        assert cls.processors() == (("a", ()),)

    def test_processing_single_mapping(self):
        cls = make_uploader(processing={"a": [1], "b": [2, 3]})
        assert cls.processors() == (("a", (1,)), ("b", (2, 3)))

    def test_processing_single_entry(self):
        cls = make_uploader(processing=ProcessorEntry("convert", ("png",)))
        assert cls.processors() == (("convert", ("png",)),)

    def test_process_classmethod_is_additive(self):
        cls = make_uploader(processing=("a",))
        cls.process("b")
        cls.process({"c": [1, 2]})
        assert cls.processors() == (("a", ()), ("b", ()), ("c", (1, 2)))

    def test_no_processing_declared(self):
        cls = make_uploader()
        assert cls.processors() == ()

    def test_base_class_has_no_processors(self):
        make_uploader(processing=("a",))
        assert Uploader.processors() == ()

    def test_unknown_operation_accepted(self):
        cls = make_uploader(processing=("nope",))
        assert cls.processors() == (("nope", ()),)


class TestInheritance:
    """Registries are per type; inheriting is opt-in."""

    def test_subclass_starts_empty(self):
        parent = make_uploader(processing=("a",))

        class Child(parent):
            pass

        assert Child.processors() == ()

    def test_subclass_declarations_do_not_leak_to_parent(self):
        parent = make_uploader(processing=("a",))

        class Child(parent):
            processing = ("b",)

        assert parent.processors() == (("a", ()),)
        assert Child.processors() == (("b", ()),)

    def test_inherit_processors_copies_parent_first(self):
        parent = make_uploader(processing=("a",))
        parent.process("b")

        class Child(parent, inherit_processors=True):
            processing = ({"resize": [32, 32]},)

        assert Child.processors() == (("a", ()), ("b", ()), ("resize", (32, 32)))

    def test_inherit_is_a_snapshot(self):
        parent = make_uploader(processing=("a",))

        class Child(parent, inherit_processors=True):
            pass

        parent.process("b")
        assert Child.processors() == (("a", ()),)

    def test_child_uses_own_pipeline_when_running(self):
        parent = make_uploader(processing=("a",))

        class Child(parent):
            processing = ("b",)

        child = Child()
        child.calls = []
        child.run_processors()
        assert child.calls == [("b", ())]


class TestRunProcessors:
    """Running the pipeline from an instance."""

    def test_run_in_order(self):
        cls = make_uploader(processing=("a", "b"))
        cls.process({"c": [1, 2]})
        uploader = cls()
        uploader.calls = []
        uploader.run_processors()
        assert uploader.calls == [("a", ()), ("b", ()), ("c", (1, 2))]

    def test_failure_propagates_and_stops(self):
        def fails(self):
            self.calls.append(("fails", ()))
            raise OSError("cannot read")

        cls = make_uploader(processing=("a", "fails", "b"), fails=fails)
        uploader = cls()
        uploader.calls = []
        with pytest.raises(OSError, match="cannot read"):
            uploader.run_processors()
        assert uploader.calls == [("a", ()), ("fails", ())]

    def test_operations_transform_held_file(self):
        class Upper(Uploader):
            processing = ("upcase", {"suffix": ["!"]})

            def upcase(self):
                self.file = self.file.upper()

            def suffix(self, text):
                self.file = self.file + text

        uploader = Upper("hello")
        uploader.run_processors()
        assert uploader.file == "HELLO!"

    def test_constructor_stores_context(self):
        uploader = Uploader("data", model="user", mounted_as="avatar")
        assert uploader.file == "data"
        assert uploader.model == "user"
        assert uploader.mounted_as == "avatar"
        assert "data" in repr(uploader)
