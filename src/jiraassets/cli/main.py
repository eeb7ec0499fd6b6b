"""Host-facing command line: one lifecycle action per invocation, JSON in and out."""

import argparse
import sys
from typing import Any, Optional

from pydantic import ValidationError

from jiraassets._package import DOCS_URL, __version__
from jiraassets.cli.console import print_error, print_json, print_warning
from jiraassets.exceptions import JiraAssetsError
from jiraassets.helpers.logger import get_logger, setup_logging
from jiraassets.helpers.utils import load_json_data, load_json_or_path
from jiraassets.models.diagnostics import Diagnostic
from jiraassets.models.resource import ObjectResourceModel
from jiraassets.provider import JiraAssetsProvider

logger = get_logger(__name__)

ACTIONS = ("getSchema", "create", "read", "update", "delete", "import", "readObjectSchema")
# Actions that cannot run without an input document.
INPUT_REQUIRED = ("create", "read", "update", "delete", "import")


def argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jiraassets",
        description="Terraform provider plugin for Jira Assets",
        epilog=f"Assets REST API reference: {DOCS_URL}",
    )
    parser.add_argument("action", choices=ACTIONS, help="Action to perform.")
    parser.add_argument("--data", help="JSON string input.")
    parser.add_argument("-f", "--file", help="Path to JSON or YAML file input.")
    parser.add_argument(
        "-c",
        "--provider-config",
        help="Provider block as a JSON string or a path to a JSON/YAML file.",
    )
    parser.add_argument("--log-level", help="Override the configured log level.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_action(
    provider: JiraAssetsProvider,
    action: str,
    input_data: Optional[dict[str, Any]],
    provider_config: Optional[dict[str, Any]],
) -> dict[str, Any]:
    """
    Execute one action and return the response document.

    :param provider: Provider instance (not yet configured).
    :param action: One of ACTIONS.
    :param input_data: Parsed action input.
    :param provider_config: Parsed provider block.
    :return: {"schema": ...}, {"state": ...} or {"data": ...}.
    """
    if action == "getSchema":
        return {
            "schema": {
                "provider": provider.schema().to_dict(),
                "resources": {
                    name: cls.schema().to_dict() for name, cls in provider.resources().items()
                },
                "data_sources": {
                    name: cls.schema().to_dict() for name, cls in provider.data_sources().items()
                },
            },
            "metadata": provider.metadata(),
        }

    if action in INPUT_REQUIRED and not input_data:
        raise ValueError(f"Input data is required for '{action}'.")

    context = provider.configure(provider_config)

    if action == "readObjectSchema":
        data_source = provider.resource("jiraassets_objectschema", context)
        return {"data": data_source.read(input_data or {})}

    resource = provider.resource("jiraassets_object", context)

    if action == "create":
        state = resource.create(ObjectResourceModel.model_validate(input_data))
    elif action == "read":
        state = resource.read(ObjectResourceModel.model_validate(input_data))
    elif action == "update":
        plan = ObjectResourceModel.model_validate(input_data.get("plan", input_data))
        prior = input_data.get("state")
        state = resource.update(plan, ObjectResourceModel.model_validate(prior) if prior else None)
    elif action == "delete":
        resource.delete(ObjectResourceModel.model_validate(input_data))
        return {"state": None}
    elif action == "import":
        state = resource.import_state(str(input_data.get("id") or ""))
    else:
        raise ValueError(f"Unsupported action: {action}")

    return {"state": state.to_dict()}


def main(argv: Optional[list[str]] = None, provider: Optional[JiraAssetsProvider] = None) -> int:
    """
    Main entry point for the Jira Assets provider plugin.

    Returns the process exit code: 0 on success, 1 when diagnostics were emitted.
    """
    args = argument_parser().parse_args(argv)
    setup_logging(log_level=args.log_level)
    provider = provider or JiraAssetsProvider()

    try:
        input_data = None
        if args.data or args.file:
            input_data = load_json_data(json_str=args.data, json_file=args.file)
        provider_config = load_json_or_path(args.provider_config)
        if provider_config is None and args.action != "getSchema":
            print_warning("No provider configuration given, using JIRAASSETS_* environment variables.")

        print_json(run_action(provider, args.action, input_data, provider_config))
        return 0

    except JiraAssetsError as e:
        diagnostics = e.to_diagnostics()
    except ValidationError as e:
        diagnostics = [
            Diagnostic(
                summary="Invalid input",
                detail=error["msg"],
                attribute=".".join(str(x) for x in error["loc"]) or None,
            )
            for error in e.errors()
        ]
    except ValueError as e:
        diagnostics = [Diagnostic(summary="Invalid input", detail=str(e))]
    finally:
        provider.close()

    for diagnostic in diagnostics:
        logger.error(diagnostic.summary, detail=diagnostic.detail, attribute=diagnostic.attribute)
        print_error(f"{diagnostic.summary}: {diagnostic.detail}")
    print_json({"diagnostics": [d.to_dict() for d in diagnostics]})
    return 1


def cli_main() -> None:
    """Entry point function for console scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
