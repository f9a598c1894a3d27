"""
Path handling for gamelist entries.

Extracts ROM filenames from gamelist paths and resolves them against the
ROM directory.
"""

from pathlib import Path, PurePosixPath


class MalformedPathError(ValueError):
    """A gamelist path has no final component to use as a filename."""

    def __init__(self, path: str, name: str = None):
        self.path = path
        self.name = name
        detail = f" (game: {name})" if name else ""
        super().__init__(f"Gamelist path has no filename component: {path!r}{detail}")


class PathHandler:
    """
    Handles path conversions between gamelist.xml and the ROM directory.

    ES-DE writes ROM paths relative to the gamelist (e.g. "./Game.zip" or
    "./subdir/Game.zip"). Only the final component is used to locate the ROM
    in the ROM directory.
    """

    def __init__(self, rom_directory: Path):
        """
        Initialize path handler.

        Args:
            rom_directory: Directory holding the ROM files
        """
        self.rom_directory = Path(rom_directory)

    @staticmethod
    def get_rom_filename(rom_path: str, name: str = None) -> str:
        """
        Get the filename component of a gamelist ROM path.

        Args:
            rom_path: Path as written in gamelist.xml
            name: Game name, only used for error reporting

        Returns:
            Final path component (e.g., "Game.zip")

        Raises:
            MalformedPathError: If the path is empty, a root, or ends in
                "." or ".."
        """
        filename = PurePosixPath(PathHandler.normalize_path(rom_path)).name
        if filename in ('', '.', '..'):
            raise MalformedPathError(rom_path, name)
        return filename

    def resolve_rom_path(self, filename: str) -> Path:
        """
        Join a ROM filename onto the ROM directory.

        Args:
            filename: Bare ROM filename

        Returns:
            Path inside the ROM directory
        """
        return self.rom_directory / filename

    @staticmethod
    def normalize_path(path: str) -> str:
        """
        Normalize path separators to forward slashes.

        Args:
            path: Path string

        Returns:
            Normalized path with forward slashes
        """
        return path.replace('\\', '/')
