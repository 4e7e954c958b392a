import pygame

DISABLED_BG = (190, 190, 190)
DISABLED_FG = (120, 120, 120)


class Button:
    def __init__(self, rect, text, font, bg, fg):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.fg = fg
        self.enabled = True

    def draw(self, surface):
        bg = self.bg if self.enabled else DISABLED_BG
        fg = self.fg if self.enabled else DISABLED_FG
        pygame.draw.rect(surface, bg, self.rect, border_radius=10)
        pygame.draw.rect(surface, (0, 0, 0), self.rect, width=2, border_radius=10)
        txt = self.font.render(self.text, True, fg)
        surface.blit(txt, txt.get_rect(center=self.rect.center))

    def is_clicked(self, event):
        return (self.enabled and event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                and self.rect.collidepoint(event.pos))


class NumberInput:
    """
    Integer field. on_commit(text) fires on Enter or when focus leaves the
    field with a changed value.
    """

    def __init__(self, rect, font, label, value="", max_len=5, on_commit=None):
        self.rect = pygame.Rect(rect)
        self.font = font
        self.label = label
        self.text = str(value)
        self.max_len = max_len
        self.on_commit = on_commit
        self.active = False
        self.enabled = True
        self._committed = self.text

    def _commit(self):
        if self.text != self._committed:
            self._committed = self.text
            if self.on_commit:
                self.on_commit(self.text)

    def set_enabled(self, enabled: bool):
        self.enabled = enabled
        if not enabled:
            # the value in the field is the one being used now
            self.active = False
            self._committed = self.text

    def handle_event(self, event):
        if not self.enabled:
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            was_active = self.active
            self.active = self.rect.collidepoint(event.pos)
            if was_active and not self.active:
                self._commit()

        if event.type == pygame.KEYDOWN and self.active:
            if event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self._commit()
            elif event.key == pygame.K_TAB:
                self.active = False
                self._commit()
            else:
                # digits only, bounded length
                if event.unicode and event.unicode.isdigit() and len(self.text) < self.max_len:
                    self.text += event.unicode

    def draw(self, surface):
        label = self.font.render(self.label, True, (230, 230, 230))
        surface.blit(label, (self.rect.x, self.rect.y - 20))

        if not self.enabled:
            bg = DISABLED_BG
        else:
            bg = (240, 240, 240) if self.active else (220, 220, 220)
        pygame.draw.rect(surface, bg, self.rect, border_radius=8)
        pygame.draw.rect(surface, (0, 0, 0), self.rect, width=2, border_radius=8)

        fg = (20, 20, 20) if self.enabled else DISABLED_FG
        img = self.font.render(self.text, True, fg)
        surface.blit(img, img.get_rect(midleft=(self.rect.x + 10, self.rect.centery)))

    def value(self):
        return self.text.strip()


class AlertDialog:
    """Blocking message box: while open it swallows all input until OK."""

    def __init__(self, font):
        self.font = font
        self.message = None
        self.ok_btn = Button((0, 0, 140, 44), "OK", font, (70, 140, 255), (245, 245, 245))

    @property
    def open(self):
        return self.message is not None

    def show(self, message: str):
        self.message = message

    def handle_event(self, event):
        if not self.open:
            return False
        if self.ok_btn.is_clicked(event):
            self.message = None
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
            self.message = None
        return True

    def draw(self, surface):
        if not self.open:
            return
        w, h = surface.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        surface.blit(overlay, (0, 0))

        box = pygame.Rect(0, 0, 480, 180)
        box.center = (w // 2, h // 2)
        pygame.draw.rect(surface, (245, 245, 245), box, border_radius=14)
        pygame.draw.rect(surface, (0, 0, 0), box, 2, border_radius=14)

        txt = self.font.render(self.message, True, (10, 10, 10))
        surface.blit(txt, txt.get_rect(center=(box.centerx, box.centery - 30)))

        self.ok_btn.rect.center = (box.centerx, box.centery + 40)
        self.ok_btn.draw(surface)
