"""Dark grey theme."""

from dag_bands.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_fallback_fill="#777777",
    node_stroke="#e0e0e0",
    node_stroke_width=2.0,
    label_color="#ffffff",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=22.0,
    title_color="#ffffff",
    title_font_size=24.0,
    edge_active_color="#bbbbbb",
    edge_blocked_color="#555555",
)
