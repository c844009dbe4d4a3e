from softraster.mouse import Mouse, MouseEvent, MouseEventType


def test_move_updates_position():
    mouse = Mouse()
    mouse.on_mouse_move(10, 20)
    assert mouse.pos() == (10, 20)
    event = mouse.read()
    assert event.type is MouseEventType.MOVE
    assert event.pos == (10, 20)


def test_event_snapshots_button_state():
    mouse = Mouse()
    mouse.on_mouse_move(3, 4)
    mouse.on_left_pressed(3, 4)
    mouse.on_right_pressed(3, 4)
    mouse.read()
    left = mouse.read()
    right = mouse.read()
    assert left == MouseEvent(MouseEventType.L_PRESS, True, False, 3, 4)
    assert right.left_is_pressed and right.right_is_pressed


def test_release_clears_buttons():
    mouse = Mouse()
    mouse.on_left_pressed(0, 0)
    mouse.on_right_pressed(0, 0)
    mouse.on_left_released(0, 0)
    mouse.on_right_released(0, 0)
    assert not mouse.left_is_pressed and not mouse.right_is_pressed
    kinds = [mouse.read().type for _ in range(4)]
    assert kinds == [
        MouseEventType.L_PRESS,
        MouseEventType.R_PRESS,
        MouseEventType.L_RELEASE,
        MouseEventType.R_RELEASE,
    ]


def test_wheel_events():
    mouse = Mouse()
    mouse.on_wheel_up(1, 1)
    mouse.on_wheel_down(1, 1)
    assert mouse.read().type is MouseEventType.WHEEL_UP
    assert mouse.read().type is MouseEventType.WHEEL_DOWN


def test_read_empty_is_invalid():
    event = Mouse().read()
    assert not event.is_valid
    assert event.type is MouseEventType.INVALID


def test_buffer_keeps_latest():
    mouse = Mouse()
    moves = [(i, i) for i in range(Mouse.BUFFER_SIZE + 2)]
    for x, y in moves:
        mouse.on_mouse_move(x, y)
    read = []
    while not mouse.is_empty():
        read.append(mouse.read().pos)
    assert read == moves[-Mouse.BUFFER_SIZE:]


def test_enter_and_leave():
    mouse = Mouse()
    assert mouse.is_in_window is False
    mouse.on_mouse_enter()
    assert mouse.is_in_window is True
    mouse.on_mouse_leave()
    assert mouse.is_in_window is False


def test_flush():
    mouse = Mouse()
    mouse.on_mouse_move(1, 2)
    mouse.flush()
    assert mouse.is_empty()
    assert mouse.pos() == (1, 2)