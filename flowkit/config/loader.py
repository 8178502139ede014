"""Loading, composing and saving configuration files."""

from __future__ import annotations

import os
from typing import Protocol, Sequence

from flowkit.config.config import DEFAULT_PATH, Config, global_path, is_default_path
from flowkit.config.processor import processor_run


class ConfigDoesNotExistError(FileNotFoundError):
    """Raised when no configuration file could be found."""

    def __init__(self, message: str = "missing configuration") -> None:
        super().__init__(message)


def exists(path: str) -> bool:
    """True when ``path`` exists and is not a directory."""
    try:
        info = os.stat(path)
    except FileNotFoundError:
        return False
    return not os.path.isdir(path) and info is not None


class Parser(Protocol):
    """A configuration format."""

    def serialize(self, conf: Config) -> bytes:
        """Encode a configuration."""

    def deserialize(self, raw: bytes) -> Config:
        """Decode a configuration."""

    def supports_format(self, extension: str) -> bool:
        """Whether files with this extension use this format."""


class ReaderWriter(Protocol):
    """Storage that configuration files are read from and written to."""

    def read_file(self, source: str) -> bytes:
        """Return the contents of ``source``; raise FileNotFoundError if absent."""

    def write_file(self, filename: str, data: bytes, perm: int) -> None:
        """Write ``data`` to ``filename``."""


class FileSystem:
    """A reader and writer backed by the local file system."""

    def read_file(self, source: str) -> bytes:
        with open(source, "rb") as handle:
            return handle.read()

    def write_file(self, filename: str, data: bytes, perm: int) -> None:
        descriptor = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, perm)
        with os.fdopen(descriptor, "wb") as handle:
            handle.write(data)


class Parsers(list):
    """The configured parsers, searched in order."""

    def find_for_format(self, extension: str) -> Parser | None:
        return next((p for p in self if p.supports_format(extension)), None)


def _extension(path: str) -> str:
    base = os.path.basename(path)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


class Loader:
    """Reads, merges, validates and saves configuration."""

    def __init__(self, reader_writer: ReaderWriter) -> None:
        self._reader_writer = reader_writer
        self._parsers = Parsers()
        self.loaded_locations: list[str] = []

    def add_config_parser(self, parser: Parser) -> None:
        self._parsers.append(parser)

    def save(self, conf: Config, path: str) -> None:
        """Serialize ``conf`` with the parser for the path's extension."""
        parser = self._parsers.find_for_format(_extension(path))
        if parser is None:
            raise ValueError("parser not found for format")
        self._reader_writer.write_file(path, parser.serialize(conf), 0o644)

    def load(self, paths: Sequence[str]) -> Config:
        """Load and merge configuration files, later ones overriding earlier ones.

        For the default paths the local file is preferred and the global one
        is only read when the local one is missing.
        """
        if is_default_path(paths):
            try:
                conf = self._load_config(DEFAULT_PATH)
            except ConfigDoesNotExistError:
                pass
            else:
                return self._postprocess(conf)
            try:
                conf = self._load_config(global_path())
            except Exception as exc:
                raise ConfigDoesNotExistError() from exc
            return self._postprocess(conf)

        base: Config | None = None
        for path in paths:
            conf = self._load_config(path)
            if base is None:
                base = conf
            else:
                self._compose(base, conf)

        if base is None:
            raise ConfigDoesNotExistError()
        return self._postprocess(base)

    def _load_config(self, path: str) -> Config:
        self.loaded_locations.append(path)
        raw = self._load_file(path)
        processed = processor_run(raw)
        parser = self._parsers.find_for_format(_extension(path))
        if parser is None:
            raise ValueError(f"parser not found for config: {path}")
        return parser.deserialize(processed)

    def _load_file(self, path: str) -> bytes:
        try:
            return self._reader_writer.read_file(path)
        except FileNotFoundError as exc:
            raise ConfigDoesNotExistError() from exc

    @staticmethod
    def _postprocess(conf: Config) -> Config:
        conf.validate()
        return conf

    @staticmethod
    def _compose(base: Config, conf: Config) -> None:
        for account in conf.accounts:
            base.accounts.add_or_update(account.name, account)
        for network in conf.networks:
            base.networks.add_or_update(network)
        for contract in conf.contracts:
            base.contracts.add_or_update(contract)
        for deployment in conf.deployments:
            base.deployments.add_or_update(deployment)