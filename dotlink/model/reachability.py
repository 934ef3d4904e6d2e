"""ReachabilityTracker - Connected component of the first dragged vertex.

The reachable set starts with the seed vertex (the origin of the session's
first drag) and grows by fixed-point iteration over the edge list: every
scan adds the far endpoint of any edge with exactly one reachable endpoint,
until a full scan adds nothing. The set never shrinks within a session.
"""

import logging

from dotlink.model.session import Session

logger = logging.getLogger(__name__)


class ReachabilityTracker:
    """Recomputes the reachable set of a session after edges are added."""

    @staticmethod
    def propagate(session: Session) -> set[int]:
        """Grow session.reachable_ids to its fixed point over session.edges.

        Without a seed nothing is reachable and the set stays empty.

        Returns:
            Ids that became reachable during this call.
        """
        reachable = session.reachable_ids
        added: set[int] = set()
        if not reachable:
            return added

        rounds = 0
        changed = True
        while changed:
            changed = False
            rounds += 1
            for edge in session.edges:
                start_in = edge.start.id in reachable
                end_in = edge.end.id in reachable
                if start_in == end_in:
                    continue
                newly = edge.end.id if start_in else edge.start.id
                reachable.add(newly)
                added.add(newly)
                changed = True

        if added:
            logger.debug(f"Propagation reached {sorted(added)} in {rounds} rounds")
        return added
