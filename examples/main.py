#!/usr/bin/env python3
"""
Example script demonstrating basic usage of the json-instance-inspector library.

Run from the project root after installing the package:
    python examples/main.py data/order.json
"""

from instance_inspector import InstanceInspector
from instance_inspector.paths import is_collection_path
from instance_inspector.render import print_schema, to_yaml
import sys

SAMPLE = """
{
  "id": 1042,
  "customer": {"name": "Ada", "vip": true},
  "tags": ["new", "priority"],
  "lines": [
    {"sku": "A-1", "qty": 2, "price": 9.95},
    {"sku": "B-2", "qty": 1, "gift": {"wrap": true}}
  ],
  "history": []
}
"""

def main():
    inspector = InstanceInspector(float_mode="decimal")

    if len(sys.argv) > 1:
        print(f"Inspecting {sys.argv[1]}...")
        document = inspector.inspect_file(sys.argv[1])
    else:
        print("Inspecting built-in sample...")
        document = inspector.inspect(SAMPLE)

    print_schema(document)

    # Every field whose value came out of an array
    for node in document.iter_nodes():
        if is_collection_path(node.path):
            print(f"list field: {node.path}")

    print(to_yaml(document))


if __name__ == '__main__':
    main()
