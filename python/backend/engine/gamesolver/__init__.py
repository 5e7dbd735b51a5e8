from backend.engine.gamesolver.solver import MAX_EXPANSIONS, SearchLimitReached, Solver

__all__ = ["MAX_EXPANSIONS", "SearchLimitReached", "Solver"]
