"""Data model and graph operations for the connectivity puzzle.

Follows the separation of Geometry (where things are) vs Topology (how things connect):
- Vertex: Graph point (wraps a Point, has ID, target or generated)
- Edge: Committed stroke between two vertices
- Session: Owner of vertices, edges, score and reachable set
- SnapResolver: Binds stroke positions to vertices
- ReachabilityTracker: Fixed-point growth of the connected component
- ConnectionLedger: Appends edges and keeps the score current
- RenderSnapshot: Read-only view for renderers
"""

from dotlink.model.connection_ledger import ConnectionLedger, EdgeResult
from dotlink.model.edge import Edge
from dotlink.model.reachability import ReachabilityTracker
from dotlink.model.session import Session
from dotlink.model.snap_resolver import SnapResolver
from dotlink.model.snapshot import DragSegment, RenderSnapshot
from dotlink.model.vertex import Vertex

__all__ = [
    "Vertex",
    "Edge",
    "Session",
    "SnapResolver",
    "ReachabilityTracker",
    "ConnectionLedger",
    "EdgeResult",
    "DragSegment",
    "RenderSnapshot",
]
