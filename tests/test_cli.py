"""Tests for the command-line entry point."""

import json
from unittest.mock import patch

import dns.resolver
import pytest
from click.testing import CliRunner

from ipcheck import __version__
from ipcheck.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def patched_resolver(static_resolver):
    with patch("ipcheck.cli.create_resolver", return_value=static_resolver) as factory:
        yield factory


class TestCLI:
    """Test cases for the ipcheck command."""

    def test_no_argument_prints_usage(self, runner):
        """Test missing address exits with a usage message."""
        result = runner.invoke(main, [])

        assert result.exit_code == 2
        assert "Usage:" in result.output
        assert "Example: ipcheck 192.168.1.1" in result.output

    def test_plain_report(self, runner):
        """Test the plain report for a private address."""
        result = runner.invoke(main, ["192.168.1.1", "--no-dns", "--plain"])

        assert result.exit_code == 0
        assert "IP Class: C (192.0.0.0 to 223.255.255.255)" in result.output
        assert "Type: Private" in result.output
        assert "11000000.10101000.00000001.00000001" in result.output

    def test_rich_report(self, runner):
        """Test the default rich rendering."""
        result = runner.invoke(main, ["8.8.8.8", "--no-dns"])

        assert result.exit_code == 0
        assert "Valid IP Address" in result.output
        assert "Type: Public" in result.output

    def test_invalid_address_exit_code(self, runner):
        """Test malformed input still prints a report but exits non-zero."""
        result = runner.invoke(main, ["256.1.1.1", "--no-dns", "--plain"])

        assert result.exit_code == 1
        assert "Invalid IP Address Format" in result.output

    def test_empty_address(self, runner):
        result = runner.invoke(main, ["  ", "--plain"])

        assert result.exit_code == 1
        assert "Please enter an IP address." in result.output

    def test_dns_lookup(self, runner, patched_resolver, static_resolver):
        """Test the resolver is built from options and closed."""
        result = runner.invoke(main, ["8.8.8.8", "--plain", "-r", "dns", "-w", "0.5"])

        assert result.exit_code == 0
        assert "Hostname: dns.google" in result.output
        patched_resolver.assert_called_once_with("dns", timeout=0.5)
        assert static_resolver.closed is True

    def test_dns_failure_is_reported(self, runner, patched_resolver):
        """Test unresolvable addresses still succeed."""
        result = runner.invoke(main, ["203.0.113.7", "--plain"])

        assert result.exit_code == 0
        assert "Hostname: Unable to resolve" in result.output

    def test_dns_resolver_without_configuration(self, runner):
        """Test a host with no resolv.conf still gets a full report."""
        with patch("dns.resolver.Resolver.read_resolv_conf",
                   side_effect=dns.resolver.NoResolverConfiguration("no resolv.conf")):
            result = runner.invoke(main, ["8.8.8.8", "--resolver", "dns", "--plain"])

        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert result.exit_code == 0
        assert "IP Class: A (1.0.0.0 to 126.255.255.255)" in result.output
        assert "Hostname: Unable to resolve" in result.output

    def test_unexpected_error_is_reported(self, runner):
        """Test unexpected failures print an error instead of a traceback."""
        with patch("ipcheck.cli.run_check", side_effect=RuntimeError("boom")):
            result = runner.invoke(main, ["8.8.8.8", "--no-dns"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Unexpected error: boom" in result.output

    def test_no_dns_skips_resolver(self, runner, patched_resolver):
        result = runner.invoke(main, ["8.8.8.8", "--plain", "--no-dns"])

        assert result.exit_code == 0
        patched_resolver.assert_not_called()
        assert "Hostname" not in result.output

    def test_json_export(self, runner, tmp_path):
        """Test writing the result to a JSON file."""
        json_file = tmp_path / "out" / "result.json"

        result = runner.invoke(main, ["::1", "--no-dns", "--json", str(json_file)])

        assert result.exit_code == 0
        data = json.loads(json_file.read_text(encoding="utf-8"))
        assert data["address"] == "::1"
        assert data["ip_version"] == "IPv6"
        assert data["special"] == "loopback"
        assert data["meta"]["generator"] == "IPCheck"

    def test_json_export_error(self, runner, tmp_path):
        """Test an unwritable path is reported without a traceback."""
        blocker = tmp_path / "file"
        blocker.write_text("x")

        result = runner.invoke(main, ["8.8.8.8", "--no-dns", "--json", str(blocker / "result.json")])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
