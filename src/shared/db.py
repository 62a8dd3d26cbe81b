"""Schema management for SQL-backed providers, shared by both contexts.

Memory providers need no schema, so both helpers skip them.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in _SQL_PROVIDERS:
            yield provider


def setup_db(domain: Domain):
    """Create tables for every aggregate and entity the domain persists."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])

            records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
            for record in records:
                if record.cls.meta_.provider == provider.name:
                    # Touching the DAO registers the table on the provider's metadata
                    domain.repository_for(record.cls)._dao  # noqa: B018

            # Outbox tables are registered as internal repositories
            if hasattr(domain, "_outbox_repos") and provider.name in domain._outbox_repos:
                domain._outbox_repos[provider.name]._dao  # noqa: B018

            provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop every table the domain created."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
