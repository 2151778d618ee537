"""YAML configuration files."""

import logging
from abc import ABC, abstractproperty
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Type, TypeVar

import yaml

T = TypeVar("T", bound="Config")


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses list their keys with defaults in "required" and "optional". After
    loading, the caller must call validate() to fill in defaults:

        cfg = LetterConfig.load(Path("letters.yml"))
        cfg.validate()
        print(cfg["title"])

    Problems in the file are logged as errors rather than raised, so the caller
    decides (through the logging exit level) whether they are fatal.
    """

    def __init__(self, path: Optional[Path], data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @abstractproperty
    def required(self) -> Dict[str, Any]:
        """Required configuration keys and their defaults."""

    @abstractproperty
    def optional(self) -> Dict[str, Any]:
        """Optional configuration keys and their defaults."""

    @property
    def source(self) -> str:
        return str(self.path) if self.path else "<defaults>"

    def validate(self, **defaults: Any):
        """Check the loaded keys and merge in defaults.

        Keyword arguments override the static defaults from "required" and
        "optional", but not values present in the file.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.source, key)
        for key in self.data:
            if key not in self.required and key not in self.optional:
                logging.warning("%s: unknown key %r", self.source, key)
        self.data = {**self.required, **self.optional, **defaults, **self.data}

    @classmethod
    def default(cls: Type[T]) -> T:
        """Return a configuration with every key set to its default."""
        cfg = cls(None, {})
        cfg.data = {**cfg.required, **cfg.optional}
        return cfg

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file."""
        try:
            with open(path, encoding="utf-8") as f:
                return cls.load_from(path, f)
        except OSError as ex:
            logging.error("cannot read %s: %s", path, ex.strerror)
        except UnicodeDecodeError as ex:
            logging.error("cannot read %s: %s", path, ex)
        return cls(path, {})

    @classmethod
    def loads(cls: Type[T], path: Path, content: str) -> T:
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Path, content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data).__name__)
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        """Get a configuration value."""
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it does not exist."""
        return self.data.get(key)

    def get_bool(self, key: str) -> bool:
        """Get a true/false value.

        Anything other than a YAML boolean is logged as an error and read as
        false.
        """
        val = self.get(key)
        if val is None:
            return False
        if not isinstance(val, bool):
            logging.error(
                "%s: %r must be true or false, not %r", self.source, key, val
            )
            return False
        return val
