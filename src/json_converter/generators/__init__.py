"""Output format generators."""

from .csv_generator import CSVGenerator
from .jsonl_generator import JSONLGenerator
from .sql_generator import SQLGenerator
from .toml_generator import TOMLGenerator
from .typescript_generator import TypeScriptGenerator
from .xml_generator import XMLGenerator
from .yaml_generator import YAMLGenerator

__all__ = [
    "CSVGenerator",
    "SQLGenerator",
    "YAMLGenerator",
    "XMLGenerator",
    "TOMLGenerator",
    "TypeScriptGenerator",
    "JSONLGenerator",
]
