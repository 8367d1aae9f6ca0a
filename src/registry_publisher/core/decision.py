"""Decide what a publish run should do with the registry package.

The decision is a pure function of the live metadata, the candidate content
hash, the current time and the cooldown, so every branch can be tested
without collaborators.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from registry_publisher.core.errors import PreconditionViolation
from registry_publisher.core.semver import SemanticVersion
from registry_publisher.integrations.metadata_source.types import PublishedMetadata

REGISTRY_MAJOR = 0
REGISTRY_MINOR = 1


class PublishAction(Enum):
    RETAG_LATEST = "retag-latest"
    PUBLISH_NEW = "publish-new"
    SKIP = "skip"


class SkipReason(Enum):
    UNMODIFIED = "unmodified"
    CHANGED_TOO_RECENTLY = "changed too recently"


@dataclass(frozen=True)
class PublishDecision:
    """Outcome of a run.

    ``version`` is the version that ends up tagged ``latest``: the stranded
    highest version for RETAG_LATEST, the bumped version for PUBLISH_NEW, and
    None for SKIP. ``skip_reason`` is set only for SKIP.
    """

    action: PublishAction
    version: SemanticVersion | None = None
    skip_reason: SkipReason | None = None

    @property
    def description(self) -> str:
        if self.action is PublishAction.RETAG_LATEST:
            return f"Old version {self.version} was never tagged latest, so updating"
        if self.action is PublishAction.PUBLISH_NEW:
            return f"New packages have been added, so publishing {self.version}"
        if self.skip_reason is SkipReason.UNMODIFIED:
            return "No new packages published, so no need to publish new registry"
        return "Changed too recently, so no need to publish new registry yet"


def next_registry_version(live_version: SemanticVersion) -> SemanticVersion:
    """Bump the patch of the registry's fixed 0.1.x scheme.

    Raises:
        PreconditionViolation: If ``live_version`` is not 0.1.x
    """
    if live_version.major != REGISTRY_MAJOR or live_version.minor != REGISTRY_MINOR:
        msg = (
            f"Live registry version {live_version} is outside the "
            f"{REGISTRY_MAJOR}.{REGISTRY_MINOR}.x scheme"
        )
        raise PreconditionViolation(msg)
    return live_version.bump_patch()


def is_past_cooldown(last_modified: datetime, now: datetime, cooldown: timedelta) -> bool:
    return now - last_modified > cooldown


def decide_publish_action(
    live: PublishedMetadata,
    new_content_hash: str,
    now: datetime,
    cooldown: timedelta,
) -> PublishDecision:
    """Pick exactly one of retag-latest, publish-new or skip.

    Precedence:
    1. The highest published version is not the one tagged latest: a previous
       run published but never promoted, so retag it.
    2. The content hash changed and the live package is older than the
       cooldown: publish the next patch version.
    3. Otherwise skip, distinguishing an unchanged hash from a recent change.

    Raises:
        PreconditionViolation: If the live version is outside the 0.1.x scheme
    """
    new_version = next_registry_version(live.version)

    if live.highest_semver_version != live.version:
        return PublishDecision(PublishAction.RETAG_LATEST, version=live.highest_semver_version)

    if live.content_hash == new_content_hash:
        return PublishDecision(PublishAction.SKIP, skip_reason=SkipReason.UNMODIFIED)

    if not is_past_cooldown(live.last_modified, now, cooldown):
        return PublishDecision(PublishAction.SKIP, skip_reason=SkipReason.CHANGED_TOO_RECENTLY)

    return PublishDecision(PublishAction.PUBLISH_NEW, version=new_version)
