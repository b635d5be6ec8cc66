"""
Wang Terrain Tools - Editor Constants

Configuration constants for the editor tools: mouse buttons, modifier keys,
default sizes and undo depth.
"""

import pygame

# Mouse buttons (pygame numbering)
BUTTON_PRIMARY = 1
BUTTON_SECONDARY = 3

# Holding any of these makes terrain tools ignore surrounding tiles
MODIFIER_MASK = pygame.KMOD_SHIFT | pygame.KMOD_CTRL | pygame.KMOD_ALT
MODIFIER_KEYS = frozenset({
    pygame.K_LSHIFT,
    pygame.K_RSHIFT,
    pygame.K_LCTRL,
    pygame.K_RCTRL,
    pygame.K_LALT,
    pygame.K_RALT,
})

# Default map tile size in pixels
TILE_SIZE = 16

# UI Layout
PICKER_WIDTH = 200
TOOLBAR_HEIGHT = 40
STATUS_HEIGHT = 30
CANVAS_OFFSET_X = PICKER_WIDTH
CANVAS_OFFSET_Y = TOOLBAR_HEIGHT

# Undo history
MAX_UNDO_LEVELS = 50
