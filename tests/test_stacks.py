from sarifkit.message import Message
from sarifkit.stacks import Stack, StackFrame, Suppression


def test_empty_stack_emits_null_frames():
    assert Stack().to_dict() == {"frames": None}


def test_add_frame_appends_in_order():
    stack = Stack()
    first = StackFrame(module="a")
    second = StackFrame(module="b")
    stack.add_frame(first)
    stack.add_frame(second)
    assert stack.frames == [first, second]


def test_stack_message_text_and_markdown():
    stack = Stack().with_text_message("text").with_message_markdown("md")
    assert stack.message == Message(text="text", markdown="md")


def test_stack_round_trip():
    frame = StackFrame(module="mod", thread_id=4, location={"id": 1})
    frame.add_parameter("x")
    frame.add_parameter("y")
    stack = Stack(frames=[frame]).with_text_message("boom")
    restored = Stack.from_dict(stack.to_dict())
    assert restored == stack
    assert restored.frames[0].parameters == ["x", "y"]


def test_stack_frame_member_names():
    frame = StackFrame(module="m", thread_id=7)
    assert frame.to_dict() == {"module": "m", "threadId": 7}


def test_suppression_emits_null_members():
    assert Suppression("external").to_dict() == {
        "kind": "external",
        "status": None,
        "location": None,
        "guid": None,
        "justification": None,
    }


def test_suppression_round_trip():
    suppression = Suppression(
        "inSource", status="accepted", guid="g-1", justification="false positive"
    )
    suppression.add_string("reviewer", "someone")
    restored = Suppression.from_dict(suppression.to_dict())
    assert restored == suppression
    assert list(suppression.to_dict())[-1] == "properties"