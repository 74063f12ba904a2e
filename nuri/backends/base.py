import logging
from pathlib import Path

from ..errors import ThemeExistsError, ThemeWriteError

logger = logging.getLogger(__name__)


class ThemeBackend:
    """A target application that can serialize and install a palette."""

    name = None
    # Directory under the config root where themes are installed
    app_dir = None
    extension = ""

    def serialize(self, palette, theme_name):
        raise NotImplementedError

    def theme_path(self, theme_name, config_home):
        """Path a theme named `theme_name` is installed to."""
        return Path(config_home) / self.app_dir / "themes" / f"{theme_name}{self.extension}"

    def install(self, palette, theme_name, config_home, no_clobber=False):
        """Write the theme into the application's themes directory.

        Args:
            palette: AnsiPalette to serialize
            theme_name: Theme name (also the file name)
            config_home: Config root, see config.resolve_config_home
            no_clobber: Refuse to replace an existing theme

        Returns:
            Path of the written theme
        """
        path = self.theme_path(theme_name, config_home)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ThemeWriteError(path.parent, "failed to create themes directory") from e
        return self.write_to(palette, theme_name, path, no_clobber=no_clobber)

    def write_to(self, palette, theme_name, path, no_clobber=False):
        """Write the theme to an arbitrary path."""
        path = Path(path)
        if no_clobber and path.exists():
            raise ThemeExistsError(path)
        content = self.serialize(palette, theme_name)
        try:
            with open(path, "w") as f:
                f.write(content)
        except OSError as e:
            raise ThemeWriteError(path) from e
        logger.info("wrote %s theme to %s", self.name, path)
        return path
