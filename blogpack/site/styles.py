"""Stylesheet written to style.css and linked from every page.

Below 64em the side menu is hidden behind the menu button (a CSS-only
checkbox toggle); from 64em up it is always visible and the content column
moves right to make room.
"""

CSS = r"""
:root {
  --bg: #fff;
  --fg: #515151;
  --heading: #313131;
  --muted: #9a9a9a;
  --border: #eee;
  --link: #268bd2;
  --menu-bg: #202020;
  --menu-fg: rgba(255, 255, 255, .6);
  --menu-width: 14rem;
  --serif: "PT Serif", Georgia, "Times New Roman", serif;
  --sans: "PT Sans", Helvetica, Arial, sans-serif;
  --mono: ui-monospace, "SF Mono", Menlo, Consolas, monospace;
}

* { box-sizing: border-box; }

html { font-size: 16px; line-height: 1.5; }

body {
  margin: 0;
  font-family: var(--serif);
  color: var(--fg);
  background: var(--bg);
  -webkit-text-size-adjust: 100%;
  text-rendering: optimizeLegibility;
}

a { color: var(--link); text-decoration: none; }
a:hover, a:focus { text-decoration: underline; }

h1, h2, h3, h4, h5, h6 {
  margin: 1rem 0 .5rem;
  font-family: var(--sans);
  font-weight: 700;
  line-height: 1.25;
  color: var(--heading);
  text-rendering: optimizeLegibility;
}
h1 { font-size: 2rem; }
h2 { font-size: 1.5rem; margin-top: 1.5rem; }
h3 { font-size: 1.25rem; margin-top: 1.5rem; }
h4, h5, h6 { font-size: 1rem; margin-top: 1rem; }

p { margin: 0 0 1rem; }
strong { color: var(--heading); }
ul, ol, dl { margin: 0 0 1rem; }
hr { position: relative; margin: 1.5rem 0; border: 0; border-top: 1px solid var(--border); }
abbr { font-size: 85%; font-weight: bold; color: #555; text-transform: uppercase; }

code, pre { font-family: var(--mono); }
code { padding: .25em .5em; font-size: 85%; color: #bf616a; background: #f9f9f9; border-radius: 3px; }
pre {
  display: block;
  margin: 0 0 1rem;
  padding: 1rem;
  font-size: .8rem;
  line-height: 1.4;
  white-space: pre;
  overflow: auto;
  background: #f9f9f9;
}
pre code { padding: 0; font-size: 100%; color: inherit; background: transparent; }

blockquote {
  margin: .8rem 0;
  padding: .5rem 1rem;
  color: #7a7a7a;
  border-left: .25rem solid #e5e5e5;
}
blockquote p:last-child { margin-bottom: 0; }

table { width: 100%; margin-bottom: 1rem; border: 1px solid #e5e5e5; border-collapse: collapse; }
td, th { padding: .25rem .5rem; border: 1px solid #e5e5e5; }
tbody tr:nth-child(odd) td, tbody tr:nth-child(odd) th { background: #f9f9f9; }

img { display: block; max-width: 100%; margin: 0 0 1rem; border-radius: 5px; }

/* Layout */

.container {
  max-width: 38rem;
  margin-left: auto;
  margin-right: auto;
  padding: 0 1rem;
}

.masthead {
  padding-top: 1rem;
  padding-bottom: 1rem;
  margin-bottom: 3rem;
  border-bottom: 1px solid var(--border);
}
.masthead-title { margin: 0 0 0 2.5rem; color: #505050; }
.masthead-title a { color: #505050; }
.masthead-title small { font-size: 75%; font-weight: 400; color: #c0c0c0; letter-spacing: 0; }

#articleContent { min-height: 60vh; }

footer { padding: 2rem 0; font-size: .85rem; color: var(--muted); }

/* Posts and pages */

.page, .post { margin-bottom: 4em; }
.page-title, .post-title, .post-title a { color: #303030; }
.page-title, .post-title { margin-top: 0; }
.post-date { display: block; margin-top: -.5rem; margin-bottom: 1rem; color: var(--muted); }
.post-description { font-style: italic; }

.related-posts { padding-top: 2rem; border-top: 1px solid var(--border); }
.related-posts h2 { margin-top: 0; font-size: 1rem; }
.related-posts ul { padding-left: 0; list-style: none; }
.related-posts li small { font-size: 75%; color: var(--muted); }
.related-posts li a:hover { color: var(--link); text-decoration: none; }

.pagination {
  overflow: hidden;
  margin: 0 -1.5rem 1rem;
  font-family: var(--sans);
  color: #ccc;
  text-align: center;
}
.pagination-item {
  display: block;
  padding: 1rem;
  border: 1px solid var(--border);
}
.pagination-item:first-child { margin-bottom: -1px; }
a.pagination-item:hover { background: #f5f5f5; text-decoration: none; }

/* Captioned images from the image include */

.image { margin: 0 0 1.5rem; text-align: center; }
.image img { margin: 0 auto .5rem; }
.image figcaption { font-size: .85rem; color: var(--muted); font-style: italic; }
.image .image-attribution { margin: .25rem 0 0; font-size: .75rem; color: var(--muted); }
.image .image-attribution a { color: var(--muted); text-decoration: underline; }

/* Side menu */

.menu-checkbox { position: absolute; opacity: 0; pointer-events: none; }

.menu-button {
  position: absolute;
  top: .8rem;
  left: 1rem;
  z-index: 20;
  padding: .25rem .75rem;
  font-size: 1.25rem;
  color: #505050;
  background: var(--bg);
  border-radius: .25rem;
  cursor: pointer;
  user-select: none;
}
.menu-button:active, .menu-checkbox:focus ~ .menu-button { color: var(--link); }

#menu {
  position: fixed;
  top: 0;
  bottom: 0;
  left: calc(-1 * var(--menu-width));
  z-index: 10;
  width: var(--menu-width);
  padding: 1.5rem 1rem;
  overflow-y: auto;
  font-family: var(--sans);
  font-size: .875rem;
  color: var(--menu-fg);
  background: var(--menu-bg);
  visibility: hidden;
  transition: all .3s ease-in-out;
}
#menu a { color: #fff; }
#menu .menu-title { font-size: 1.25rem; font-weight: 700; }
#menu .menu-links { padding: 0; list-style: none; }
#menu .menu-links li { padding: .25rem 0; border-bottom: 1px solid rgba(255, 255, 255, .1); }

.menu-checkbox:checked ~ #menu { left: 0; visibility: visible; }
.menu-checkbox:checked ~ .container,
.menu-checkbox:checked ~ .menu-button { transform: translateX(var(--menu-width)); }
.container, .menu-button { transition: transform .3s ease-in-out; }

.portrait {
  width: 8rem;
  height: 8rem;
  margin: 0 auto 1rem;
  object-fit: cover;
  border-radius: 50%;
  border: 3px solid rgba(255, 255, 255, .2);
}

/* Back-to-top controls */

#backtotop { color: var(--muted); }

#scrollUp {
  position: fixed;
  right: 1rem;
  bottom: 1rem;
  z-index: 5;
  display: block;
  width: 2.5rem;
  height: 2.5rem;
  font-size: 1.25rem;
  line-height: 2.5rem;
  text-align: center;
  color: #fff;
  background: rgba(0, 0, 0, .4);
  border-radius: 50%;
}
#scrollUp:hover { background: rgba(0, 0, 0, .7); text-decoration: none; }

/* Wide viewports: persistent side menu */

@media (min-width: 38em) {
  html { font-size: 20px; }
  .pagination-item { float: left; width: 50%; }
  .pagination-item:first-child { margin-bottom: 0; border-top-left-radius: 4px; border-bottom-left-radius: 4px; }
  .pagination-item:last-child { margin-left: -1px; border-top-right-radius: 4px; border-bottom-right-radius: 4px; }
}

@media (min-width: 64em) {
  .menu-button { display: none; }
  #menu { left: 0; visibility: visible; }
  .container { margin-left: calc(var(--menu-width) + 4rem); margin-right: 4rem; }
  .masthead-title { margin-left: 0; }
  .menu-checkbox:checked ~ .container { transform: none; }
}

@media print {
  #menu, .menu-button, #scrollUp, #backtotop, .pagination { display: none; }
  .container { max-width: none; margin: 0; }
}
"""
