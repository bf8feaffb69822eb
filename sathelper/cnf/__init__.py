from sathelper.cnf.cnf_types import CnfDocument, render_clause

__all__ = ["CnfDocument", "render_clause"]
