"""Find container layout files by name."""
from pathlib import Path
from typing import Optional


class ContainerFileFinder:
    """Search container layout files under the given base directory."""

    PRIORITY = [".json", ".yaml", ".yml"]

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def find_by_name(self, name: str) -> Optional[Path]:
        """
        Find a layout file by name.

        Args:
            name: File stem (e.g., "container")

        Returns:
            The Path if found, otherwise None. .json wins over YAML variants
            of the same name.
        """
        if not self.base_dir.is_dir():
            return None

        candidates: list[Path] = []
        for ext in self.PRIORITY:
            for file_path in self.base_dir.rglob(f"{name}{ext}"):
                if file_path.is_file():
                    candidates.append(file_path)

        if not candidates:
            return None

        candidates.sort(key=lambda path: (self.PRIORITY.index(path.suffix), str(path)))
        return candidates[0]
