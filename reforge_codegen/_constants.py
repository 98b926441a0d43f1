"""Common literal values used across reforge_codegen.

These constants keep the emitted file location and import path centralized so
the emitter, the output writer, and tests can import the same values without
drifting. Intended for internal use within the reforge_codegen package.

Examples
--------
>>> from reforge_codegen import _constants
>>> _constants.PAGE_RELATIVE_PATH
'src/App.jsx'
>>> _constants.IMPORT_LINE_TEMPLATE.format(name="Footer")
"import { Footer } from './templates';"
"""

PAGE_SOURCE_DIR = "src"
PAGE_FILE_NAME = "App.jsx"
PAGE_RELATIVE_PATH = f"{PAGE_SOURCE_DIR}/{PAGE_FILE_NAME}"
TEMPLATES_IMPORT_PATH = "./templates"
IMPORT_LINE_TEMPLATE = "import {{ {name} }} from '" + TEMPLATES_IMPORT_PATH + "';"
APP_COMPONENT_TEMPLATE = "app_component.jsx.jinja"
