# gridsnake/viz/keyboard.py
import pygame as pg

KEYMAP = {
    pg.K_w: "up", pg.K_UP: "up",
    pg.K_s: "down", pg.K_DOWN: "down",
    pg.K_a: "left", pg.K_LEFT: "left",
    pg.K_d: "right", pg.K_RIGHT: "right",
}

def translate(event):
    if event.type == pg.QUIT:
        return "quit"
    if event.type == pg.KEYDOWN:
        if event.key == pg.K_ESCAPE: return "quit"
        if event.key == pg.K_r: return "reset"
        return KEYMAP.get(event.key)
    return None

class Keyboard:
    def poll(self):
        """All commands since the last poll, oldest first."""
        cmds = []
        for e in pg.event.get():
            cmd = translate(e)
            if cmd is not None:
                cmds.append(cmd)
        return cmds
