"""
NUBAN Toolkit

Generation and validation of Nigerian Uniform Bank Account Numbers
according to the CBN revised standard (2020), with bank inference
on top of a remote bank directory.
"""

__version__ = "1.0.0"
