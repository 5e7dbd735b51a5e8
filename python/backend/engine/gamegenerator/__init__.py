from backend.engine.gamegenerator.generator import SHUFFLE_STEPS, GameGenerator

__all__ = ["SHUFFLE_STEPS", "GameGenerator"]
