"""
Avatar uploader example.

Demonstrates:
- Declaring a pipeline with the ``processing`` class attribute
- Adding steps later with ``process``
- Extra steps from uploadkit.yaml (``uploadkit processors show``)

The "file" here is a dict describing an image, so the example runs without
any imaging library.
"""

from uploadkit import Uploader


class AvatarUploader(Uploader):
    processing = ("strip_metadata", {"resize_to_fit": [200, 200]})

    def strip_metadata(self):
        self.file = {k: v for k, v in self.file.items() if k != "exif"}

    def resize_to_fit(self, width, height):
        scale = min(width / self.file["width"], height / self.file["height"], 1)
        self.file = {**self.file, "width": int(self.file["width"] * scale), "height": int(self.file["height"] * scale)}

    def convert(self, fmt):
        self.file = {**self.file, "format": fmt}


AvatarUploader.process({"convert": "png"})


class ThumbnailUploader(AvatarUploader, inherit_processors=True):
    processing = {"resize_to_fit": [32, 32]}


if __name__ == "__main__":
    avatar = AvatarUploader({"width": 800, "height": 600, "format": "jpeg", "exif": {"camera": "x"}})
    avatar.run_processors()
    print(avatar.file)
