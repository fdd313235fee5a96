"""Export the option registry for external help and usage renderers.

The serialized form is a plain dict/list structure that maps naturally
to both JSON and YAML.

Usage
-----
::

    from backup_options.schema.serializer import RegistrySerializer

    serializer = RegistrySerializer()
    print(serializer.to_yaml())
"""
from __future__ import annotations

import json
from collections.abc import Iterable

import yaml

from backup_options.schema.registry import OptionDescriptor, list_options


class RegistrySerializer:
    """Converts option descriptors to JSON-compatible dicts.

    Type tags are emitted as lowercase names; a missing default or
    legacy tag is emitted as ``null``.
    """

    def descriptor_to_dict(self, descriptor: OptionDescriptor) -> dict[str, object]:
        return {
            "name": descriptor.name,
            "type": descriptor.type.name.lower(),
            "short_description": descriptor.short_description,
            "long_description": descriptor.long_description,
            "default": descriptor.default,
            "legacy_type": (
                descriptor.legacy_type.name.lower() if descriptor.legacy_type else None
            ),
        }

    def to_dict(
        self, descriptors: Iterable[OptionDescriptor] | None = None
    ) -> dict[str, object]:
        """Serialize ``descriptors`` (default: the full registry) to a dict."""
        if descriptors is None:
            descriptors = list_options()
        return {
            "kind": "OptionRegistry",
            "options": [self.descriptor_to_dict(d) for d in descriptors],
        }

    def to_json(
        self, descriptors: Iterable[OptionDescriptor] | None = None, indent: int = 2
    ) -> str:
        """Serialize the registry to a JSON string."""
        return json.dumps(self.to_dict(descriptors), indent=indent, ensure_ascii=False)

    def to_yaml(self, descriptors: Iterable[OptionDescriptor] | None = None) -> str:
        """Serialize the registry to a YAML string."""
        return yaml.dump(
            self.to_dict(descriptors), default_flow_style=False, allow_unicode=True
        )
