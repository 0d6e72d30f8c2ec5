# ABOUTME: Follow relation between accounts: who is interested in whose library.
# ABOUTME: Insertion-ordered, duplicate-free, and never self-referencing.

import logging

from booked.library.errors import NoFollowListError, SelfFollowError

logger = logging.getLogger(__name__)


class FollowRegistry:
    """Maps an account to the accounts it follows."""

    def __init__(self, follows: dict[str, list[str]] | None = None) -> None:
        self._follows: dict[str, list[str]] = follows if follows is not None else {}

    @property
    def follows(self) -> dict[str, list[str]]:
        """The underlying account -> followed accounts mapping, for persistence."""
        return self._follows

    def follow(self, caller: str, target: str) -> bool:
        """Start following target.

        Returns:
            True if target was added, False if it was already followed.

        Raises:
            SelfFollowError: If target is the caller.
        """
        if target == caller:
            raise SelfFollowError("Cannot follow yourself")

        followed = self._follows.setdefault(caller, [])
        if target in followed:
            logger.info("Already following %s", target)
            return False

        followed.append(target)
        logger.info("Now following %s", target)
        return True

    def unfollow(self, caller: str, target: str) -> bool:
        """Stop following target.

        Returns:
            True if target was removed, False if it was not followed.

        Raises:
            NoFollowListError: If the caller has never followed anyone.
        """
        followed = self._follows.get(caller)
        if followed is None:
            raise NoFollowListError(f"{caller} doesn't have any followed accounts")

        if target not in followed:
            logger.info("Not following %s", target)
            return False

        followed.remove(target)
        logger.info("Unfollowed %s", target)
        return True

    def list_followed(self, caller: str) -> list[str]:
        """Accounts the caller follows, in the order they were followed."""
        return list(self._follows.get(caller, []))
