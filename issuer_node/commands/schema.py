"""Schema command for inspecting a credential schema and converting attributes."""

import json
import logging
from typing import Sequence

from configargparse import ArgumentParser

from ..config import argparse as arg
from ..config.base import BaseSettings
from ..config.settings import Settings
from ..config.util import common_config
from ..core.error import BaseError
from ..credential_schema.error import SchemaError
from ..credential_schema.json_schema import JSONSchema
from ..credential_schema.loader import loader_for
from ..credential_schema.models.credential_attribute import CredentialAttribute
from ..messaging.models.base import BaseModelError

from . import PROG

LOGGER = logging.getLogger(__name__)


class SchemaCommandError(BaseError):
    """Base exception for schema command errors."""


def init_argument_parser(parser: ArgumentParser):
    """Initialize an argument parser with the module's arguments."""
    return arg.load_argument_groups(parser, *arg.group.get_registered(arg.CAT_SCHEMA))


def inspect_schema(settings: BaseSettings) -> dict:
    """Load the configured schema and report on it.

    Reports the schema attribute labels; the JSON-LD context and schema hash
    when a schema type is configured; and the converted credential attributes
    when any are configured.
    """
    url = settings.get_str("schema.url")
    try:
        loader = loader_for(url, settings.get_str("schema.ipfs_gateway"))
        schema = JSONSchema.load(loader)
        result = {
            "url": url,
            "attributes": sorted(schema.attribute_names().schema_attrs()),
        }

        schema_type = settings.get_str("schema.type")
        if schema_type:
            result["type"] = schema_type
            result["jsonLdContext"] = schema.json_ld_context()
            result["schemaHash"] = schema.schema_hash(schema_type).hex()

        supplied = settings.get_list("schema.attributes")
        if supplied:
            credential_attributes = [
                CredentialAttribute.deserialize(attribute) for attribute in supplied
            ]
            schema.validate_and_convert(credential_attributes)
            result["credentialAttributes"] = [
                attribute.serialize() for attribute in credential_attributes
            ]
    except (SchemaError, BaseModelError) as e:
        raise SchemaCommandError(f"Error processing schema {url}") from e

    LOGGER.info("Processed schema %s", url)
    return result


def execute(argv: Sequence[str] = None):
    """Entrypoint."""
    parser = arg.create_argument_parser(prog=PROG)
    parser.prog += " schema"
    get_settings = init_argument_parser(parser)
    args = parser.parse_args(argv)
    settings = Settings(get_settings(args))
    common_config(settings)

    print(json.dumps(inspect_schema(settings), indent=2))


def main():
    """Execute the main line."""
    if __name__ == "__main__":
        execute()


main()
