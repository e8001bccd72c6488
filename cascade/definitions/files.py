"""File-backed definition repositories (JSON and TOML).

Each file holds a top-level table mapping resolver names to definitions.
When several paths are given, later files override earlier ones.
"""

import json
import tomllib
from abc import abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from cascade.definitions.inmemory import InMemoryDefinitionRepository
from cascade.exceptions import DefinitionFileError
from cascade.observability.logging import get_logger

logger = get_logger(__name__)

PathLike = str | Path


class FileDefinitionRepository(InMemoryDefinitionRepository):
    """Loads every definition eagerly at construction."""

    format_name = "file"

    def __init__(
        self,
        paths: PathLike | Sequence[PathLike],
        base_path: PathLike | None = None,
    ) -> None:
        """Load definitions from one or more files.

        Args:
            paths: File path or list of paths, relative paths resolved against base_path
            base_path: Directory for relative paths

        Raises:
            DefinitionFileError: If a file is missing, unreadable or malformed
        """
        if isinstance(paths, str | Path):
            paths = [paths]
        self._base_path = Path(base_path) if base_path is not None else None
        super().__init__(self._load_all(paths))

    def _resolve_path(self, path: PathLike) -> Path:
        path = Path(path)
        if self._base_path is None or path.is_absolute():
            return path
        return self._base_path / path

    def _load_all(self, paths: Sequence[PathLike]) -> dict[str, Any]:
        definitions: dict[str, Any] = {}
        for raw_path in paths:
            path = self._resolve_path(raw_path)
            if not path.exists():
                raise DefinitionFileError(str(path), f"{self.format_name} file not found")
            try:
                content = path.read_bytes()
            except OSError as e:
                raise DefinitionFileError(
                    str(path), f"{self.format_name} file not readable"
                ) from e

            data = self._parse(path, content)
            if not isinstance(data, dict):
                raise DefinitionFileError(
                    str(path), f"{self.format_name} file must contain an object"
                )
            definitions.update(data)

            logger.info(
                "definitions_loaded",
                path=str(path),
                format=self.format_name,
                resolver_count=len(data),
            )
        return definitions

    @abstractmethod
    def _parse(self, path: Path, content: bytes) -> Any:
        pass


class JsonDefinitionRepository(FileDefinitionRepository):
    """Definitions read from JSON files."""

    format_name = "JSON"

    def _parse(self, path: Path, content: bytes) -> Any:
        try:
            return json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DefinitionFileError(str(path), f"Invalid JSON ({e})") from e


class TomlDefinitionRepository(FileDefinitionRepository):
    """Definitions read from TOML files."""

    format_name = "TOML"

    def _parse(self, path: Path, content: bytes) -> Any:
        try:
            return tomllib.loads(content.decode())
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise DefinitionFileError(str(path), f"Invalid TOML ({e})") from e
