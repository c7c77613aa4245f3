"""Event attendance publishing pipeline.

Three independent single-shot stages driven by a shared ``config.json``:

- ``event_pipeline.cli.excel2json``: spreadsheet of responses -> summary JSON
- ``event_pipeline.cli.hugo_build``: static site build in ``phase2/``
- ``event_pipeline.cli.deploy_ftp``: upload configured files over FTP
"""

__version__ = "0.1.0"
