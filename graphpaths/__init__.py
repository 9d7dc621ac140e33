"""Graph algorithms for grids, weighted graphs, DAGs, successor graphs, spanning trees and components."""

__version__ = "0.1.0"