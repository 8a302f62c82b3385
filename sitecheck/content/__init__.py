from sitecheck.content.toc import build_toc, add_heading_ids, heading_id
from sitecheck.content.theme import (
    LIGHT_PALETTE,
    DARK_PALETTE,
    theme_extension,
    render_base_css,
)
