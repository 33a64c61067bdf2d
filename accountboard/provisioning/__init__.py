from accountboard.provisioning.provisioner import (
    Provisioner,
    ProvisioningReport,
    ProvisioningStep,
    provision,
)
from accountboard.provisioning.seed import SeedResult, seed_demo_tenant

__all__ = [
    "Provisioner",
    "ProvisioningReport",
    "ProvisioningStep",
    "SeedResult",
    "provision",
    "seed_demo_tenant",
]
