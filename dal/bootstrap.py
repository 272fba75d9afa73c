"""Data Access Bootstrap — wires every persistence component to one provider.

Invariants:
    - All components of one DataAccess share the same ConnectionProvider and
      the same MappingRegistry
    - init_data_access() configures logging once, then builds the engine-owning
      provider from settings

Design Decisions:
    - Explicit construction over a module-level singleton: tests and callers that
      borrow a connection (SharedConnection) build their own DataAccess
"""

import logging
from dataclasses import dataclass

from dal.config import Settings, get_settings
from dal.core.column_mapping import MappingRegistry
from dal.core.repository_protocols import ConnectionProvider
from dal.infrastructure.database import DatabaseSessionManager
from dal.infrastructure.observability import setup_logging
from dal.persistence.admon import PersistentAccountExecutive, PersistentRegistration
from dal.persistence.audit import AuditLogger, PersistentAuditLog
from dal.persistence.config import (
    PersistentCity, PersistentCountry, PersistentIdentificationType,
    PersistentOffice, PersistentPlan,
)
from dal.persistence.crm import PersistentBeneficiary, PersistentOwner
from dal.schemas.mappings import build_mapping_registry

logger = logging.getLogger(__name__)


@dataclass
class DataAccess:
    provider: ConnectionProvider
    registry: MappingRegistry
    countries: PersistentCountry
    cities: PersistentCity
    offices: PersistentOffice
    identification_types: PersistentIdentificationType
    plans: PersistentPlan
    owners: PersistentOwner
    beneficiaries: PersistentBeneficiary
    registrations: PersistentRegistration
    account_executives: PersistentAccountExecutive
    audit_log: PersistentAuditLog


def build_data_access(
    provider: ConnectionProvider, registry: MappingRegistry | None = None,
) -> DataAccess:
    registry = registry or build_mapping_registry()
    audit_log = PersistentAuditLog(provider, registry)
    audit = AuditLogger(audit_log, provider.dialect)
    return DataAccess(
        provider=provider,
        registry=registry,
        countries=PersistentCountry(provider, registry, audit),
        cities=PersistentCity(provider, registry, audit),
        offices=PersistentOffice(provider, registry, audit),
        identification_types=PersistentIdentificationType(provider, registry, audit),
        plans=PersistentPlan(provider, registry, audit),
        owners=PersistentOwner(provider, registry, audit),
        beneficiaries=PersistentBeneficiary(provider, registry, audit),
        registrations=PersistentRegistration(provider, registry, audit),
        account_executives=PersistentAccountExecutive(provider, registry, audit),
        audit_log=audit_log,
    )


def init_data_access(settings: Settings | None = None) -> DataAccess:
    """Startup entry point: logging, engine-owning provider, registry."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    provider = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("Data access initialized")
    return build_data_access(provider, build_mapping_registry())
