__version__ = "0.3.0"
__description__ = "jadoc : JSON:API compound documents from Python object graphs"
