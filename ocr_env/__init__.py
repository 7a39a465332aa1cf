"""
OCR environment provisioning package.

This package bootstraps a local virtual environment for the EasyOCR
stack: it locates a host interpreter, creates the environment,
upgrades pip, installs the OCR packages one by one and finally warms
the EasyOCR model cache by running a short driver script inside the
new environment.

To run the provisioning from the command line see `run.py`.
"""

__version__ = "0.1.0"
