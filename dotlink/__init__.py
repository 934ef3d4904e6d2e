"""DotLink - Connect randomly placed points with the shortest strokes.

A single-session puzzle game built around a graph-connectivity engine:
- Point generation sized by difficulty level
- Snapping of stroke ends to existing points
- Incremental reachability from the first touched point
- Live score and win detection

Modules:
    core: Canvas geometry (Point, distance, centroid)
    model: Graph data and operations (Vertex, Edge, Session, ledger, reachability)
    generators: Random target layouts (PointGenerator, LayoutError)
    ui: State machine, action entry points, Plotly board and Streamlit panels

Example:
    from dotlink.ui import GameStateMachine, begin_drag, finish_drag
    sm, ctx = GameStateMachine.create(level=1)
"""
