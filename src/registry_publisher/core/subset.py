"""Check that a live registry is explained by a candidate registry."""

from collections.abc import Iterable

from registry_publisher.core.errors import SubsetViolation
from registry_publisher.core.packages import NotNeededPackage
from registry_publisher.core.registry import RegistryDocument


def validate_is_subset(
    actual: RegistryDocument,
    expected: RegistryDocument,
    not_needed: Iterable[NotNeededPackage],
) -> None:
    """Require every package in ``actual`` to be in ``expected`` or exempt.

    Only this direction is checked. Packages new in ``expected`` are fine;
    packages in ``actual`` that disappeared must be listed as not needed.

    Raises:
        SubsetViolation: For the first unexplained key.
    """
    exempt = {package.name for package in not_needed}
    for key in actual.entries:
        if key not in expected.entries and key not in exempt:
            raise SubsetViolation(key)
