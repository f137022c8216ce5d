"""Shared colors for the highlight state machine."""

# Nodes outside the selected neighborhood.
DIMMED_COLOR = "rgba(200,200,200,0.5)"

# Nodes inside the neighborhood but not adjacent to the seed.
NEIGHBORHOOD_COLOR = "rgba(150,150,150,0.75)"

# Seed node under the resource-constrained profile.
SELECTED_COLOR = "#FFB000"
