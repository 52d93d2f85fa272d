"""Static site assets: default theme CSS and runtime JS"""


MAIN_CSS = """\
:root {
  --sidebar-width: 280px;
  --toc-width: 200px;
  --content-max-width: 800px;
}

* { box-sizing: border-box; margin: 0; padding: 0; }

body {
  font-family: var(--font-sans, system-ui, -apple-system, sans-serif);
  background: var(--background, #fff);
  color: var(--foreground, #111);
  line-height: 1.6;
}

.layout { display: grid; grid-template-columns: var(--sidebar-width) 1fr; min-height: 100vh; }

.sidebar {
  background: var(--muted, #f6f6f6);
  border-right: 1px solid var(--border, #e5e5e5);
  padding: 1.5rem;
  position: sticky;
  top: 0;
  height: 100vh;
  overflow-y: auto;
}

.nav-header { margin-bottom: 1.5rem; }
.nav-logo { font-weight: 700; font-size: 1.25rem; color: inherit; text-decoration: none; }
.nav-list, .nav-children { list-style: none; }
.nav-children { margin-left: 1rem; margin-top: 0.25rem; }
.nav-item { margin-bottom: 0.25rem; }
.nav-item a {
  display: block;
  padding: 0.5rem 0.75rem;
  color: var(--muted-foreground, #555);
  text-decoration: none;
  border-radius: var(--radius, 0.375rem);
}
.nav-item a:hover { background: var(--accent, #eee); }
.nav-item.active > a { background: var(--primary, #111); color: var(--primary-foreground, #fff); }

.main {
  display: grid;
  grid-template-columns: 1fr var(--toc-width);
  gap: 2rem;
  padding: 2rem;
  max-width: calc(var(--content-max-width) + var(--toc-width) + 4rem);
}

.doc { max-width: var(--content-max-width); }
.content h1 { font-size: 2.5rem; font-weight: 700; margin-bottom: 1.5rem; }
.content h2 { font-size: 1.5rem; font-weight: 600; margin: 2rem 0 1rem; border-bottom: 1px solid var(--border, #e5e5e5); }
.content h3 { font-size: 1.25rem; font-weight: 600; margin: 1.5rem 0 0.75rem; }
.content p { margin-bottom: 1rem; }
.content pre { position: relative; padding: 1rem; margin-bottom: 1rem; overflow-x: auto; background: var(--muted, #f6f6f6); border-radius: var(--radius, 0.375rem); }

.preview-container {
  display: flex;
  flex-wrap: wrap;
  gap: 1rem;
  align-items: center;
  padding: 2rem;
  margin-bottom: 0.5rem;
  border: 1px solid var(--border, #e5e5e5);
  border-radius: var(--radius, 0.375rem);
}

.copy-btn { position: absolute; top: 0.5rem; right: 0.5rem; font-size: 0.75rem; padding: 0.25rem 0.5rem; }

.toc { position: sticky; top: 2rem; align-self: start; font-size: 0.875rem; }
.toc ul { list-style: none; }
.toc-level-3 { margin-left: 0.75rem; }
.toc-level-4 { margin-left: 1.5rem; }
"""

MAIN_JS = """\
(function () {
  'use strict';

  const currentPath = window.location.pathname;
  document.querySelectorAll('.nav-item a').forEach((link) => {
    const href = link.getAttribute('href');
    if (href === currentPath || (href !== '/' && currentPath.startsWith(href))) {
      link.parentElement.classList.add('active');
    }
  });

  document.querySelectorAll('.content pre').forEach((pre) => {
    if (pre.querySelector('.copy-btn')) return;
    const btn = document.createElement('button');
    btn.className = 'copy-btn';
    btn.type = 'button';
    btn.textContent = 'Copy';
    btn.addEventListener('click', async () => {
      const code = pre.querySelector('code');
      try {
        await navigator.clipboard.writeText((code || pre).textContent || '');
        btn.textContent = 'Copied!';
      } catch (err) {
        btn.textContent = 'Error';
      }
      setTimeout(() => { btn.textContent = 'Copy'; }, 2000);
    });
    pre.appendChild(btn);
  });
})();
"""
