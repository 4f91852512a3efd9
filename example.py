#!/usr/bin/env python3
"""
Example usage of the JSON Converter.

This script demonstrates converting one JSON document to every supported
format and registering a custom generator.
"""

import json
from json_converter import ConversionOptions, FormatGenerator, JSONConverter


class KeyListGenerator(FormatGenerator):
    """Toy generator listing the top-level keys of an object."""

    name = "keys"
    description = "Top-level keys, one per line"

    def generate(self, ir, options):
        return "\n".join(child.name for child in ir.children if child.name)


def main():
    """Main example function."""
    print("JSON Converter Example")
    print("=" * 50)

    sample_data = {
        "users": [
            {
                "id": 1,
                "name": "Alice Johnson",
                "email": "alice@example.com",
                "active": True,
                "tags": ["admin", "staff"],
                "address": {"city": "New York", "zip": "10001"}
            },
            {
                "id": 2,
                "name": "Bob Smith",
                "email": "bob@example.com",
                "active": False,
                "tags": [],
                "address": {"city": "San Francisco", "zip": "94105"}
            }
        ]
    }
    json_string = json.dumps(sample_data, indent=2)

    converter = JSONConverter()
    options = ConversionOptions(table_name="users", root_name="user_list")

    for format_name in converter.get_supported_formats():
        print(f"\n--- {format_name}: {converter.get_format_description(format_name)} ---")
        print(converter.convert(json_string, format_name, options))

    converter.register_generator(KeyListGenerator())
    print("\n--- custom generator ---")
    print(converter.convert(json_string, "keys"))

    print("\n✅ Example completed successfully!")


if __name__ == "__main__":
    main()
