"""sqlsplitter - split an SSMS "Script Objects" dump into one file per object
"""
__version__ = "1.0.0"
