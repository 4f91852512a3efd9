"""Registry mapping format identifiers to generators."""

import logging
import threading
from typing import Dict, Iterable, List, Optional
from .generators import (
    CSVGenerator,
    JSONLGenerator,
    SQLGenerator,
    TOMLGenerator,
    TypeScriptGenerator,
    XMLGenerator,
    YAMLGenerator
)
from .types import Format, FormatGenerator, FormatId, format_key


def default_generators(logger: Optional[logging.Logger] = None) -> List[FormatGenerator]:
    """Instances of every shipped generator, in registration order."""
    return [
        CSVGenerator(logger=logger),
        SQLGenerator(logger=logger),
        YAMLGenerator(logger=logger),
        XMLGenerator(logger=logger),
        TOMLGenerator(logger=logger),
        TypeScriptGenerator(logger=logger),
        JSONLGenerator(logger=logger),
    ]


class GeneratorRegistry:
    """
    Thread-safe mapping of format names to generators.

    Registering a name that is already present replaces the generator but
    keeps the name's original position in ``names()``.
    """

    def __init__(self, generators: Iterable[FormatGenerator] = (),
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the registry.

        Args:
            generators: Generators to register up front
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._generators: Dict[str, FormatGenerator] = {}
        for generator in generators:
            self.register(generator)

    def register(self, generator: FormatGenerator) -> None:
        """
        Register a generator under its ``name``.

        Raises:
            TypeError: If the object has no name or no callable ``generate``
        """
        name = getattr(generator, "name", None)
        if not name or not callable(getattr(generator, "generate", None)):
            raise TypeError("Generator must define a name and a generate() method")

        key = format_key(name)
        with self._lock:
            replaced = key in self._generators
            self._generators[key] = generator

        if replaced:
            self.logger.info(f"Replaced generator for format '{key}'")
        else:
            self.logger.debug(f"Registered generator for format '{key}'")

    def get(self, format_id: FormatId) -> Optional[FormatGenerator]:
        return self._generators.get(format_key(format_id))

    def names(self) -> List[str]:
        with self._lock:
            return list(self._generators)

    def __contains__(self, format_id: object) -> bool:
        if not isinstance(format_id, (str, Format)):
            return False
        return format_key(format_id) in self._generators

    def __len__(self) -> int:
        return len(self._generators)
