"""Default theme: white background, white bold labels on colored nodes."""

from dag_bands.render.style import Theme

DEFAULT_THEME = Theme(
    name="default",
    background_color="#ffffff",
    node_fallback_fill="#bbbbbb",
    node_stroke="#333333",
    node_stroke_width=2.0,
    label_color="#ffffff",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=22.0,
    title_color="#111111",
    title_font_size=24.0,
)
