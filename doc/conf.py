import sys
import os.path

import cavetengu

sys.path.append(os.path.abspath('.'))
sys.path.append(os.path.abspath('doc'))

extensions = [
    'sphinx.ext.autodoc', 'sphinx.ext.autosummary', 'sphinx.ext.doctest',
    'sphinx.ext.todo', 'sphinx.ext.viewcode',
]
project = 'cavetengu'
source_suffix = '.rst'
master_doc = 'index'

version = release = cavetengu.__version__
copyright = 'CaveTengu Team'

epub_basename = 'cavetengu - {}'.format(version)
epub_author = 'CaveTengu Team'

todo_include_todos = True

html_theme = 'sphinx_rtd_theme'


# vim: sw=4:et:ai
