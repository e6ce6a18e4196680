"""
Shared constants for the editing tools.

These values are used by both the hit-testing code and the SVG renderer.
Keep them in sync with what is drawn!
"""

# Radius in pixels of a drawn vertex; a click inside it selects the vertex
VERTEX_RADIUS = 15

# Distance in pixels within which a click counts as hitting an edge
EDGE_HIT_THRESHOLD = 10

# Stroke width of straight edges; curves are drawn thinner as sampled polylines
EDGE_STROKE_WIDTH = 3
CURVE_STROKE_WIDTH = 1.5

# Ring drawn around the vertex waiting to become an edge's second endpoint
EDGE_START_RING_COLOR = "#6464ff"
