"""
Plain-text report for a classification result
"""

from dataclasses import dataclass

from ..models import (
    ClassificationResult, ErrorKind, HostnameStatus, IPVersion, SpecialCategory,
)
from ..analysis import IPv4Classifier


RULE = "=" * 50

IPV4_SPECIAL_LABELS = {
    SpecialCategory.LOOPBACK: "Localhost (Loopback)",
    SpecialCategory.LINK_LOCAL: "Link-Local Address (APIPA)",
    SpecialCategory.MULTICAST: "Multicast Address",
}

IPV6_LINES = {
    SpecialCategory.LOOPBACK: "Special: Localhost (Loopback)",
    SpecialCategory.LINK_LOCAL: "Special: Link-Local Address",
    SpecialCategory.UNIQUE_LOCAL: "Type: Private (Unique Local)",
    SpecialCategory.MULTICAST: "Special: Multicast Address",
    SpecialCategory.NONE: "Type: Global Unicast (Public)",
}

EXAMPLES = [
    "IPv4: 192.168.1.1, 8.8.8.8, 127.0.0.1",
    "IPv6: 2001:0db8:85a3:0000:0000:8a2e:0370:7334, ::1",
]


@dataclass(frozen=True)
class ReportLine:
    """One line of the report with a rich style hint"""
    text: str = ""
    style: str = ""


def build_lines(result: ClassificationResult) -> list[ReportLine]:
    """
    Lay out the report for a result.

    Args:
        result: Classification result

    Returns:
        Report lines in display order
    """
    if result.error == ErrorKind.EMPTY_INPUT:
        return [ReportLine("Please enter an IP address.", "yellow")]

    lines = [
        ReportLine(f"IP Address: {result.address}", "bold"),
        ReportLine(RULE, "dim"),
        ReportLine(),
    ]

    if not result.is_valid:
        lines.append(ReportLine("❌ Invalid IP Address Format", "bold red"))
        lines.append(ReportLine("Please enter a valid IPv4 or IPv6 address."))
        lines.append(ReportLine())
        lines.append(ReportLine("Examples:", "dim"))
        lines.extend(ReportLine(example, "dim") for example in EXAMPLES)
        return lines

    lines.append(ReportLine("✅ Valid IP Address", "bold green"))
    lines.append(ReportLine())

    if result.ip_version == IPVersion.V4:
        lines.extend(_ipv4_lines(result))
    else:
        lines.extend(_ipv6_lines(result))

    if result.hostname_status == HostnameStatus.RESOLVED:
        lines.append(ReportLine(f"Hostname: {result.hostname}", "cyan"))
    elif result.hostname_status == HostnameStatus.FAILED:
        lines.append(ReportLine("Hostname: Unable to resolve", "yellow"))

    return lines


def _ipv4_lines(result: ClassificationResult) -> list[ReportLine]:
    lines = [
        ReportLine("IP Version: IPv4"),
        ReportLine(f"IP Class: {IPv4Classifier.describe_class(result.octets.first)}"),
        ReportLine(f"Type: {result.scope.value}",
                   "magenta" if result.is_private else "green"),
    ]

    label = IPV4_SPECIAL_LABELS.get(result.special)
    if label:
        lines.append(ReportLine(f"Special: {label}", "yellow"))

    lines.append(ReportLine())
    lines.append(ReportLine("Binary Representation:", "dim"))
    lines.append(ReportLine(result.binary, "bold"))
    return lines


def _ipv6_lines(result: ClassificationResult) -> list[ReportLine]:
    special = result.special
    return [
        ReportLine("IP Version: IPv6"),
        ReportLine(IPV6_LINES[special],
                   "green" if special == SpecialCategory.NONE else "yellow"),
        ReportLine(),
    ]


def format_report(result: ClassificationResult) -> str:
    """Render a result as plain text, one newline-terminated line each"""
    return "".join(f"{line.text}\n" for line in build_lines(result))
