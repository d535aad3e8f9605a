# snapguides/ui/help_text.py
"""
Reusable help strings for playground tooltips and glossary.
"""

# Short one-liners for widget help=
TOOLTIP_DOCUMENT = "JSON with 'page' {width, height} and 'objects' (canvas objects with id, type, left, top, width, height)."
TOOLTIP_THRESHOLD = "Screen pixels. Divided by zoom, so the snap feels the same at every zoom level."
TOOLTIP_HYSTERESIS = "Extra screen pixels that keep last frame's alignment locked while the pointer jitters."
TOOLTIP_GRID = "When nothing aligns, round the position to the nearest grid step. Grid snaps draw no guide."
TOOLTIP_ZOOM = "Canvas zoom. Guides are drawn at pos x zoom in screen pixels."
TOOLTIP_TRACE = "Replay a jittering pointer around the chosen position to see whether guides flicker."
EVAL_SHORT = "Compare guide flicker with and without hysteresis on synthetic pages. Outputs leaderboard and plots."

GLOSSARY_MD = """
### Anchor
One of an element's three alignment points on an axis: left/center/right on X, top/center/bottom on Y.

### World units
Document coordinates (points on an A4 page, 595 x 842), independent of zoom.

### Guide
A dashed line showing an accepted alignment. X guides are vertical lines, Y guides horizontal.
At most one per axis per frame.

### Page anchors
X: page left, center and right. Y: page top only; the canvas grows downward.

### Scoring
Page alignment +100 (center +20, left +15). Same anchor +80 (left-left +30, +20 more if both
text; top-top +25, +15 more if both text; center-center +10). Edge to edge +60 (top on bottom +10).
Text target +10. Minus 2 x distance. The best positive score wins.

### Hysteresis
Last frame's match stays locked while its distance is within threshold + hysteresis,
even if another candidate scores higher.

### Eligible element
Not hidden, not a guide, not a page break, positive width and height.
"""

QUICK_TROUBLESHOOT_MD = """
### Document failed to load
Use JSON with an 'objects' list. Objects without an id, smaller than 5 units, or of unknown type are skipped.

### Dragged element missing
The element may have been filtered out (hidden, too small, full-page background rectangle). Pick another id.

### No guides appear
Nothing is within the threshold. Raise the threshold or move closer to another element's edge or center.
"""
