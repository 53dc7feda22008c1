"""
Provider configuration schema.

This module declares the configuration keys the BuildKit provider accepts,
as exposed to the host for introspection and surface shape checks.
"""

from buildkit_provider.config.core import (
    Schema, StringAttribute, ListNestedAttribute, NestedAttributeObject
)


PROVIDER_SCHEMA = Schema(
    description="Configuration for the BuildKit provider.",
    attributes={
        "buildkit_host": StringAttribute(
            optional=True,
            description="The address of the BuildKit daemon. Defaults to 'unix:///var/run/buildkit/buildkitd.sock'."
        ),
        "registry_auth": ListNestedAttribute(
            optional=True,
            description="Authentication configuration for Docker registries.",
            nested_object=NestedAttributeObject(
                attributes={
                    "address": StringAttribute(
                        required=True,
                        description="The address of the Docker registry."
                    ),
                    "username": StringAttribute(
                        required=True,
                        description="The username for the Docker registry."
                    ),
                    "password": StringAttribute(
                        required=True,
                        sensitive=True,
                        description="The password for the Docker registry."
                    ),
                }
            )
        ),
    }
)


def get_provider_schema() -> Schema:
    """Get the provider configuration schema."""
    return PROVIDER_SCHEMA
