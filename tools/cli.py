# =============================================================================
# tools/cli.py  -  Direct Command-Line Invocation
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Runs ONE contact operation straight from the shell, without an MCP
#   client:
#
#     hubspot-mcp create-contact john@example.com John Doe +1234567890
#     hubspot-mcp get-contact john@example.com
#     hubspot-mcp update-contact 12345 --email new@example.com --phone +1555
#     hubspot-mcp delete-contact 12345
#     hubspot-mcp search-contacts
#     hubspot-mcp get-last-contacts
#
# HOW IT DIFFERS FROM THE MCP PATH:
#   Arguments are positional (plus flag/value pairs for update-contact) and
#   are NOT schema-validated: only presence of the required argument is
#   checked.  The operation itself is the same core/contacts.py handler.
#
# EXIT CODES:
#   0 → success (result on stdout)
#   1 → missing required argument (usage on stderr, no HubSpot call made)
#       or HubSpot failure (failure text on stderr)
# =============================================================================

import logging
import sys
from typing import Callable, Optional, TextIO

from core import contacts
from core.errors import ValidationError
from core.hubspot_client import HubSpotClient
from core.models import OperationResult


logger = logging.getLogger(__name__)

PROG = "hubspot-mcp"

# Flag → keyword argument of contacts.update_contact
UPDATE_FLAGS = {
    "--email": "email",
    "--firstName": "first_name",
    "--lastName": "last_name",
    "--phone": "phone",
}

USAGE = {
    "create-contact": (
        f"Usage: {PROG} create-contact [EMAIL] [FIRSTNAME] [LASTNAME] [PHONE]",
        f"Example: {PROG} create-contact john@example.com John Doe +1234567890",
    ),
    "get-contact": (
        f"Usage: {PROG} get-contact [EMAIL]",
        f"Example: {PROG} get-contact john@example.com",
    ),
    "delete-contact": (
        f"Usage: {PROG} delete-contact [CONTACT_ID]",
        f"Example: {PROG} delete-contact 12345",
    ),
    "update-contact": (
        f"Usage: {PROG} update-contact [CONTACT_ID] --email [EMAIL] --firstName [FIRSTNAME] "
        "--lastName [LASTNAME] --phone [PHONE]",
        f"Example: {PROG} update-contact 12345 --email new@example.com --firstName John "
        "--lastName Doe --phone +1234567890",
    ),
    "search-contacts": (
        f"Usage: {PROG} search-contacts",
        f"Example: {PROG} search-contacts",
    ),
    "get-last-contacts": (
        f"Usage: {PROG} get-last-contacts",
        f"Example: {PROG} get-last-contacts",
    ),
}


def _arg(args: list[str], index: int) -> Optional[str]:
    return args[index] if index < len(args) and args[index] else None


def _require(args: list[str], index: int, name: str) -> str:
    value = _arg(args, index)
    if value is None:
        raise ValidationError(f"missing required argument: {name}")
    return value


def parse_update_flags(args: list[str]) -> dict[str, str]:
    """Read alternating flag/value pairs.

    Pairs are taken in fixed positions (0-1, 2-3, ...).  Unknown flags and
    flags without a value are skipped.
    """
    updates: dict[str, str] = {}
    for i in range(0, len(args), 2):
        flag = args[i]
        value = _arg(args, i + 1)
        if value is None:
            continue
        key = UPDATE_FLAGS.get(flag)
        if key:
            updates[key] = value
    return updates


# -----------------------------------------------------------------------------
# Command runners: argv tail → OperationResult
# -----------------------------------------------------------------------------
def _create(client: HubSpotClient, args: list[str]) -> OperationResult:
    email = _require(args, 0, "email")
    return contacts.create_contact(
        client, email, first_name=_arg(args, 1), last_name=_arg(args, 2), phone=_arg(args, 3)
    )


def _get(client: HubSpotClient, args: list[str]) -> OperationResult:
    return contacts.get_contact(client, _require(args, 0, "email"))


def _delete(client: HubSpotClient, args: list[str]) -> OperationResult:
    return contacts.delete_contact(client, _require(args, 0, "contactId"))


def _search(client: HubSpotClient, args: list[str]) -> OperationResult:
    return contacts.search_contacts(client)


def _update(client: HubSpotClient, args: list[str]) -> OperationResult:
    contact_id = _require(args, 0, "contactId")
    return contacts.update_contact(client, contact_id, **parse_update_flags(args[1:]))


def _last(client: HubSpotClient, args: list[str]) -> OperationResult:
    return contacts.get_last_contacts(client)


COMMANDS: dict[str, Callable[[HubSpotClient, list[str]], OperationResult]] = {
    "create-contact": _create,
    "get-contact": _get,
    "delete-contact": _delete,
    "search-contacts": _search,
    "update-contact": _update,
    "get-last-contacts": _last,
}


def is_command(argv: list[str]) -> bool:
    """True when argv (without the program name) starts with a known command."""
    return bool(argv) and argv[0] in COMMANDS


def run_command(
    client: HubSpotClient,
    argv: list[str],
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
) -> int:
    """Run one command and return the process exit code.

    Args:
        client: Bound HubSpot client.
        argv: Command name followed by its arguments.
        stdout / stderr: Output streams (tests pass StringIO).
    """
    command, args = argv[0], list(argv[1:])
    runner = COMMANDS[command]

    try:
        result = runner(client, args)
    except ValidationError as exc:
        logger.debug("%s: %s", command, exc)
        for line in USAGE[command]:
            print(line, file=stderr)
        return 1

    if result.success:
        print(result.text, file=stdout)
        return 0
    print(result.text, file=stderr)
    return 1
