"""Unit tests for tools.cli: argv parsing, output streams, exit codes."""
import io

import pytest

from core.errors import RemoteCallError
from core.models import ContactRecord
from tools.cli import COMMANDS, is_command, parse_update_flags, run_command


def _run(client, *argv):
    out, err = io.StringIO(), io.StringIO()
    code = run_command(client, list(argv), stdout=out, stderr=err)
    return code, out.getvalue(), err.getvalue()


class TestDispatch:
    def test_known_commands(self):
        assert set(COMMANDS) == {
            "create-contact", "get-contact", "delete-contact",
            "search-contacts", "update-contact", "get-last-contacts",
        }
        assert is_command(["get-contact", "a@b.com"])

    @pytest.mark.parametrize("argv", [[], ["serve"], ["--help"]])
    def test_other_argv_is_not_a_command(self, argv):
        assert not is_command(argv)


class TestMissingArguments:
    @pytest.mark.parametrize("command", ["create-contact", "get-contact", "delete-contact", "update-contact"])
    def test_usage_and_exit_one_without_remote_call(self, mock_client, command):
        code, out, err = _run(mock_client, command)

        assert code == 1
        assert out == ""
        assert err.startswith(f"Usage: hubspot-mcp {command}")
        assert "Example:" in err
        assert mock_client.method_calls == []


class TestCreateContact:
    def test_positional_arguments(self, mock_client):
        mock_client.create_contact.return_value = ContactRecord(id="101")

        code, out, err = _run(mock_client, "create-contact", "john@example.com", "John", "Doe", "+1234567890")

        assert code == 0
        mock_client.create_contact.assert_called_once_with({
            "email": "john@example.com", "firstname": "John",
            "lastname": "Doe", "phone": "+1234567890",
        })
        assert "Contact created successfully:" in out
        assert err == ""

    def test_no_schema_validation_on_cli(self, mock_client):
        mock_client.create_contact.return_value = ContactRecord(id="101")

        code, _, _ = _run(mock_client, "create-contact", "not-an-email")

        assert code == 0
        mock_client.create_contact.assert_called_once_with({"email": "not-an-email"})

    def test_remote_failure_exits_one(self, mock_client):
        mock_client.create_contact.side_effect = RemoteCallError("Unauthorized", status_code=401)

        code, out, err = _run(mock_client, "create-contact", "a@b.com")

        assert code == 1
        assert out == ""
        assert "Failed to create contact: Unauthorized" in err


class TestGetContact:
    def test_not_found_exits_zero(self, mock_client):
        mock_client.search_contacts.return_value = []

        code, out, _ = _run(mock_client, "get-contact", "nobody@example.com")

        assert code == 0
        assert "No contact found with email: nobody@example.com" in out


class TestUpdateContact:
    def test_flag_value_pairs(self, mock_client):
        code, out, _ = _run(
            mock_client, "update-contact", "12345",
            "--email", "new@example.com", "--firstName", "John", "--lastName", "Doe", "--phone", "+1",
        )

        assert code == 0
        mock_client.update_contact.assert_called_once_with("12345", {
            "email": "new@example.com", "firstname": "John", "lastname": "Doe", "phone": "+1",
        })
        assert "ID: 12345" in out

    def test_unknown_flags_ignored(self, mock_client):
        _run(mock_client, "update-contact", "12345", "--company", "Acme", "--phone", "555")

        mock_client.update_contact.assert_called_once_with("12345", {"phone": "555"})

    def test_no_flags_sends_empty_update(self, mock_client):
        code, _, _ = _run(mock_client, "update-contact", "12345")

        assert code == 0
        mock_client.update_contact.assert_called_once_with("12345", {})


class TestParseUpdateFlags:
    def test_dangling_flag_skipped(self):
        assert parse_update_flags(["--phone", "555", "--email"]) == {"phone": "555"}

    def test_pairs_are_positional(self):
        # "--email" sits in a value slot, so it is not read as a flag
        assert parse_update_flags(["--bogus", "--email", "x@y.com", "--phone"]) == {}


class TestListCommands:
    def test_search_contacts(self, mock_client):
        mock_client.get_page.return_value = [ContactRecord(id="1", properties={"email": "x@y.com"})]

        code, out, _ = _run(mock_client, "search-contacts")

        assert code == 0
        assert out.startswith("Last 10 contacts:")
        assert "Contact ID: 1" in out

    def test_get_last_contacts_failure(self, mock_client):
        mock_client.search_contacts.side_effect = RemoteCallError("")

        code, _, err = _run(mock_client, "get-last-contacts")

        assert code == 1
        assert "Unknown error" in err

    def test_delete_contact(self, mock_client):
        code, out, _ = _run(mock_client, "delete-contact", "12345")

        assert code == 0
        mock_client.archive_contact.assert_called_once_with("12345")
        assert "Contact with ID 12345 was successfully deleted." in out
