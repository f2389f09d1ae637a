from backend.engine.gamegenerator.generator import GameGenerator, generate_shuffled_start

__all__ = ["GameGenerator", "generate_shuffled_start"]
