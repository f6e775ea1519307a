"""
Issue-token command: mint an API bearer token.

The token is shown once; only its hash is stored.
"""

from __future__ import annotations

import argparse

from navhub.app import build_application
from navhub.interfaces.cli.cli_ui import InfoPanel, print_error


def cmd_issue_token(args: argparse.Namespace) -> int:
    application = build_application()
    service = application.get_service("access")

    try:
        issued = service.issue_token(args.subject, args.role or [])
    except ValueError as e:
        print_error(str(e))
        return 1

    content = f"""[bold]Subject:[/bold] {issued.subject}
[bold]Roles:[/bold] {", ".join(issued.roles) or "-"}

[bold]Token:[/bold] {issued.token}

[dim]Store this token now. It cannot be shown again.[/dim]"""
    InfoPanel.show("API Token Issued", content, "green")
    return 0
