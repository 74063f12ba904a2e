class NuriError(Exception):
    """Base class for errors reported to the user."""


class ImageLoadError(NuriError):
    def __init__(self, path, message):
        self.path = path
        super().__init__(f"{message}: {path}")


class ImageNotFoundError(ImageLoadError):
    def __init__(self, path):
        super().__init__(path, "file not found")


class UnsupportedImageError(ImageLoadError):
    def __init__(self, path, reason=None):
        self.reason = reason
        message = "unsupported or corrupt image format"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(path, message)


class ThemeWriteError(NuriError):
    def __init__(self, path, message="failed to write theme"):
        self.path = path
        super().__init__(f"{message}: {path}")


class ThemeExistsError(ThemeWriteError):
    def __init__(self, path):
        super().__init__(path, "theme already exists (refusing to overwrite)")
