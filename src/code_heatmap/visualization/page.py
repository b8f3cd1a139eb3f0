"""Write a self-contained HTML page for a heatmap.

The page embeds the rendered element tree, all styles and the per-file
lookup tables as a JSON blob, plus a small script that binds the same
hover behaviour in the browser.  No external assets are referenced, so
the file opens from any local path.
"""

import json
import logging
from html import escape
from pathlib import Path
from typing import Optional, Union

from ..config import DEFAULT_CONFIG, HeatmapConfig
from ..models import Report
from .dom import Element
from .heatmap import CodeHeatmap
from .highlight import style_definitions

logger = logging.getLogger(__name__)


def build_page(report: Report, config: Optional[HeatmapConfig] = None) -> str:
    """Render ``report`` and return the full HTML document."""
    config = config or DEFAULT_CONFIG
    root = Element("div", attrs={"id": "heatmap-root"})
    heatmap = CodeHeatmap(root, report, config)
    heatmap.render()

    data_json = json.dumps(
        {
            "runTime": report.total_run_time,
            "files": [rendered.lookup_tables() for rendered in heatmap.rendered_files],
        }
    )

    return _build_html(
        title=escape(config.title),
        body=root.to_html(),
        data_json=data_json,
        highlight_css=style_definitions(config.pygments_style),
    )


def write_page(
    report: Report,
    output_path: Union[str, Path] = "code-heatmap.html",
    config: Optional[HeatmapConfig] = None,
) -> str:
    """Write the heatmap page and return its absolute path."""
    html = build_page(report, config)
    out = Path(output_path).resolve()
    out.write_text(html, encoding="utf-8")
    logger.info("Wrote heatmap for %d file(s) to %s", len(report.files), out)
    return str(out)


# ── Private helpers ──────────────────────────────────────────────────


def _build_html(title: str, body: str, data_json: str, highlight_css: str) -> str:
    # The f-string uses {{ / }} to produce literal braces in CSS and JS.
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>
* {{ box-sizing: border-box; }}
body {{ margin: 0; font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; color: #24292f; background: #ffffff; }}
#page-header {{ display: flex; align-items: center; gap: 12px; padding: 12px 24px; border-bottom: 1px solid #d0d7de; }}
#page-header h1 {{ font-size: 18px; margin: 0; }}
#help-toggle {{ border: 1px solid #d0d7de; background: #f6f8fa; border-radius: 50%; width: 24px; height: 24px; cursor: pointer; }}
.tabhelp {{ padding: 8px 24px; font-size: 13px; color: #57606a; background: #f6f8fa; border-bottom: 1px solid #d0d7de; }}
.inactive-tabhelp {{ display: none; }}
.active-tabhelp {{ display: block; }}
#heatmap-layout {{ display: flex; align-items: flex-start; }}
.heatmap-module-list {{ position: sticky; top: 0; width: 260px; flex-shrink: 0; padding: 12px; font-size: 13px; max-height: 100vh; overflow-y: auto; }}
.heatmap-module-list a {{ text-decoration: none; color: #0969da; }}
.heatmap-module-header {{ font-weight: 600; margin-bottom: 8px; }}
.heatmap-module-name {{ padding: 4px 0; overflow: hidden; text-overflow: ellipsis; white-space: nowrap; }}
.heatmap-code-container {{ flex: 1; min-width: 0; padding: 12px 24px; }}
.heatmap-src-file {{ margin-bottom: 24px; }}
.heatmap-src-code-header {{ display: block; font-weight: 600; padding: 6px 0; color: #0969da; text-decoration: none; }}
.heatmap-src-code {{ font-family: SFMono-Regular, Consolas, "Liberation Mono", Menlo, monospace; font-size: 12px; border: 1px solid #d0d7de; border-radius: 6px; overflow-x: auto; }}
.heatmap-src-line-normal, .heatmap-src-line-highlight {{ display: flex; white-space: pre; }}
.heatmap-src-line-highlight {{ outline: 1px solid #1a7f37; }}
.heatmap-src-line-number {{ width: 56px; flex-shrink: 0; padding-right: 12px; text-align: right; color: #8c959f; user-select: none; }}
.heatmap-src-line-code {{ flex: 1; }}
.heatmap-skip-line {{ padding: 2px 12px; color: #8c959f; background: #f6f8fa; font-style: italic; text-align: center; }}
.content-tooltip {{ position: absolute; padding: 8px 12px; font-size: 12px; background: #ffffff; border: 1px solid #d0d7de; border-radius: 6px; box-shadow: 0 4px 12px rgba(0,0,0,0.15); pointer-events: none; z-index: 100; }}
.content-tooltip p {{ margin: 2px 0; }}
.content-tooltip-invisible {{ display: none; }}
.content-tooltip-visible {{ display: block; }}
{highlight_css}
</style>
</head>
<body>
<div id="page-header">
  <h1>{title}</h1>
  <button id="help-toggle" type="button" title="Help">?</button>
</div>
{body}
<script>
// Per-file lookup tables, indexed by visible row position.
const DATA = {data_json};

(function() {{
  var help = document.querySelector(".tabhelp");
  document.getElementById("help-toggle").addEventListener("click", function() {{
    var active = help.classList.toggle("active-tabhelp");
    help.classList.toggle("inactive-tabhelp", !active);
  }});
}})();

(function() {{
  var tooltip = document.querySelector(".content-tooltip");
  var bodies = document.querySelectorAll(".heatmap-src-code");

  function showTooltip(row, time, count, event) {{
    row.className = "heatmap-src-line-highlight";
    tooltip.className = "content-tooltip content-tooltip-visible";
    tooltip.innerHTML =
      "<p><b>Time spent: </b>" + time + " s</p>" +
      "<p><b>Total running time: </b>" + DATA.runTime + " s</p>" +
      "<p><b>Percentage: </b>" + (DATA.runTime > 0 ? 100 * (time / DATA.runTime) : 0) + "%</p>" +
      "<p><b>Run count: </b>" + count + "</p>";
    tooltip.style.left = event.pageX + "px";
    tooltip.style.top = event.pageY + "px";
  }}

  function hideTooltip(row) {{
    row.className = "heatmap-src-line-normal";
    tooltip.className = "content-tooltip content-tooltip-invisible";
  }}

  bodies.forEach(function(body, i) {{
    var tables = DATA.files[i];
    body.querySelectorAll(".heatmap-src-line-normal").forEach(function(row, j) {{
      row.addEventListener("mouseover", function(event) {{
        if (tables.count[j]) {{
          showTooltip(row, tables.time[j] || 0, tables.count[j], event);
        }}
      }});
      row.addEventListener("mouseout", function() {{ hideTooltip(row); }});
    }});
  }});
}})();
</script>
</body>
</html>"""
