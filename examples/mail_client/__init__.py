"""Mail Client — minimal example app demonstrating the courier packages.

Wires structured logging, the shared configuration store and the on-disk
key/value cache together the way an embedding mail client would at startup
and shutdown.

Modules:
    app: Client factory (create_mail_client) and MailClient
"""

from .app import CLIENT_DEFAULTS, MailClient, create_mail_client

__all__ = ["CLIENT_DEFAULTS", "MailClient", "create_mail_client"]
