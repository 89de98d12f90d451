"""
goskeleton.templates - Bundled Go Project Template Tree
=======================================================

The ``template/`` directory next to this file is the tree goskeleton
materializes. It is read through ``importlib.resources`` by
:class:`goskeleton.tree.PackageTemplateTree`.

Conventions
-----------
- Files ending in ``.tmpl`` are written without the suffix.
- Every file, with or without the suffix, is rendered with Jinja2.
- The only template variable is ``Name``, the project name::

      module {{ Name }}

- Avoid literal ``{{`` and ``{%`` in any file; wrap such text in
  ``{% raw %}...{% endraw %}``.
"""
