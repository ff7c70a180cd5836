from .text_effect import TextEffect, visible_fraction

__all__ = ['TextEffect', 'visible_fraction']
