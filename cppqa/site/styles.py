"""Inline CSS used by the static site generator."""

CSS = r"""
:root {
  --bg: #fbfbfa;
  --fg: #1c1c1c;
  --muted: #6b6b6b;
  --border: #e2e2e0;
  --link: #00599c;
  --code-bg: #f2f2f0;
  --sans: system-ui, -apple-system, "Segoe UI", "Helvetica Neue", Arial, sans-serif;
  --mono: ui-monospace, "SF Mono", "Consolas", "Liberation Mono", monospace;
  --page-max: 860px;
}

html, body { height: 100%; }

body {
  font-family: var(--sans);
  font-size: 16px;
  line-height: 1.65;
  max-width: var(--page-max);
  margin: 0 auto;
  padding: 2rem 1.5rem 3rem;
  background: var(--bg);
  color: var(--fg);
  -webkit-font-smoothing: antialiased;
}

a { color: var(--link); text-decoration: none; }
a:hover { text-decoration: underline; text-underline-offset: 0.15em; }

header {
  display: flex;
  justify-content: space-between;
  align-items: baseline;
  border-bottom: 1px solid var(--border);
  padding-bottom: 0.75rem;
  margin-bottom: 1.5rem;
  gap: 0.5rem 1rem;
  flex-wrap: wrap;
  font-size: 14px;
}

nav a { margin-left: 1rem; color: var(--muted); }
.home a { color: var(--fg); font-weight: 600; letter-spacing: 0.02em; }

footer { border-top: 1px solid var(--border); margin-top: 2.5rem; padding-top: 0.75rem; }

h1, h2, h3, h4 { line-height: 1.3; margin: 1.5rem 0 0.75rem 0; font-weight: 600; }
h1 { font-size: 26px; margin-top: 0; }
h2 { font-size: 21px; }
h3 { font-size: 17px; }
h4 { font-size: 15px; color: var(--muted); }

.muted { color: var(--muted); font-size: 14px; }
.rule { border-top: 1px solid var(--border); margin: 1.25rem 0; }
.preamble img { max-height: 96px; }
.pager { display: flex; justify-content: space-between; font-size: 14px; }

img { max-width: 100%; height: auto; }

ul { margin: 0.75rem 0; padding-left: 1.5rem; }
ol { margin: 0.75rem 0; padding-left: 1.75rem; }
li { margin: 0.3rem 0; }
li > ul, li > ol { margin: 0.25rem 0; }
ol.entries li { margin: 0.5rem 0; }

table { border-collapse: collapse; width: 100%; margin: 0.75rem 0; font-size: 15px; }
th, td { border: 1px solid var(--border); padding: 0.35rem 0.5rem; vertical-align: top; }
th { text-align: left; font-weight: 600; background: var(--code-bg); }

pre {
  overflow-x: auto;
  margin: 0.85rem 0;
  padding: 0.75rem 1rem;
  border: 1px solid var(--border);
  background: var(--code-bg);
  font-size: 14px;
  line-height: 1.5;
}

code { font-family: var(--mono); font-size: 0.92em; }
p code, li code, td code, h2 code, h3 code { background: var(--code-bg); padding: 0.1rem 0.3rem; }

blockquote {
  margin: 0.75rem 0;
  padding: 0 0.9rem;
  border-left: 3px solid var(--border);
  color: var(--muted);
}

hr { border: none; border-top: 1px solid var(--border); margin: 1.5rem 0; }

@media print {
  body { background: #fff; color: #000; max-width: none; padding: 1rem; }
  header, footer, .pager { display: none; }
  pre { white-space: pre-wrap; }
}

@media (max-width: 700px) {
  body { padding: 1.25rem 1rem 2rem; }
  nav a { margin-left: 0; margin-right: 1rem; }
}
"""
