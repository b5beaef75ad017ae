import pygame

from angel.input import Input


def _key(kind, key):
    return pygame.event.Event(kind, key=key)


def test_key_press_hold_release_cycle():
    inp = Input()
    inp.poll([_key(pygame.KEYDOWN, pygame.K_a)])
    assert inp.check(pygame.K_a) and inp.pressed(pygame.K_a)
    inp.begin_frame()
    assert inp.check(pygame.K_a)
    assert not inp.pressed(pygame.K_a)
    inp.poll([_key(pygame.KEYUP, pygame.K_a)])
    assert not inp.check(pygame.K_a)
    assert inp.released(pygame.K_a)
    inp.begin_frame()
    assert not inp.released(pygame.K_a)


def test_repeat_keydown_is_not_a_new_press():
    inp = Input()
    inp.poll([_key(pygame.KEYDOWN, pygame.K_b)])
    inp.begin_frame()
    inp.poll([_key(pygame.KEYDOWN, pygame.K_b)])
    assert inp.check(pygame.K_b)
    assert not inp.pressed(pygame.K_b)


def test_mouse_buttons_motion_and_wheel():
    inp = Input()
    inp.poll([
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)),
        pygame.event.Event(pygame.MOUSEMOTION, pos=(12, 34), rel=(0, 0), buttons=(1, 0, 0)),
        pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=3),
    ])
    assert inp.mouse_check(1) and inp.mouse_pressed(1)
    assert (inp.mouse_x, inp.mouse_y) == (12, 34)
    assert inp.mouse_wheel == 3
    inp.begin_frame()
    assert inp.mouse_wheel == 0
    inp.poll([pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(0, 0))])
    assert not inp.mouse_check(1)
    assert inp.mouse_released(1)


def test_bindings():
    inp = Input()
    inp.bind("jump", pygame.K_SPACE)
    assert inp.action("jump") is False
    inp.poll([_key(pygame.KEYDOWN, pygame.K_SPACE)])
    assert inp.action("jump") and inp.action_pressed("jump")
    inp.poll([_key(pygame.KEYUP, pygame.K_SPACE)])
    assert inp.action_released("jump")
    assert inp.action("missing") is False
    assert inp.action_pressed("missing") is False
    assert inp.action_released("missing") is False


def test_quit_request():
    inp = Input()
    assert inp.quit_requested is False
    quit_event = pygame.event.Event(pygame.QUIT)
    inp.handle_event(quit_event)
    assert inp.quit_requested is True
    assert inp.last_event is quit_event