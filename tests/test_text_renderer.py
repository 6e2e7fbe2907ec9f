from adapters.evaluator.stack_evaluator import HELP_TEXT
from adapters.renderer.text_renderer import TextRenderer
from contracts import (
    Acknowledged,
    ErrorKind,
    EvalError,
    HelpShown,
    NumberPushed,
    OperationResult,
    QuitRequested,
    StackShown,
)
from ports.renderer import Renderer


def test_text_renderer_implements_renderer_port():
    assert isinstance(TextRenderer(), Renderer)


def test_renders_values_without_trailing_zero():
    renderer = TextRenderer()

    assert renderer.render(NumberPushed(value=5)) == ["Number: 5"]
    assert renderer.render(OperationResult(operator="/", value=2.0)) == ["Result: 2"]
    assert renderer.render(OperationResult(operator="/", value=3.5)) == ["Result: 3.5"]


def test_show_and_quit_share_stack_rendering():
    renderer = TextRenderer()

    shown = renderer.render(StackShown(contents=[4, 0]))
    final = renderer.render(QuitRequested(final_stack=[4, 0]))

    assert shown == ["Stack: [4, 0]"]
    assert final == ["Final stack: [4, 0]"]


def test_renders_pop_and_clear_acknowledgements():
    renderer = TextRenderer()

    assert renderer.render(Acknowledged(command="pop", value=-1.5)) == ["Popped: -1.5"]
    assert renderer.render(Acknowledged(command="clear", contents=[1, 2])) == [
        "Clearing stack: [1, 2]"
    ]


def test_renders_error_message():
    err = EvalError(error=ErrorKind.DIVISION_BY_ZERO, message="Division by zero")

    assert TextRenderer().render(err) == ["Error: Division by zero"]


def test_help_is_split_into_lines():
    lines = TextRenderer().render(HelpShown(text=HELP_TEXT))

    assert lines == [
        "Valid operators: +, -, *, /, %",
        "Valid commands: (q)uit, (p)op, (s)how, (c)lear, ?",
    ]
