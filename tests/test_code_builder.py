import pytest

from baobao.code_builder import CodeBuilder
from baobao.fragments import Blank, Block, Indented, JsDoc, Line, Raw, Renderable, RustDoc, Sequence
from baobao.indent import Indent


class _Node(Renderable):
    def __init__(self, fragments):
        self._fragments = fragments

    def to_fragments(self):
        return list(self._fragments)


def test_basic_line():
    assert CodeBuilder.rust().line("let x = 1;").build() == "let x = 1;\n"


def test_indentation():
    code = (
        CodeBuilder.rust()
        .line("fn main() {")
        .indent()
        .line('println!("Hello");')
        .dedent()
        .line("}")
        .build()
    )
    assert code == 'fn main() {\n    println!("Hello");\n}\n'


def test_block():
    code = (
        CodeBuilder.rust()
        .block_with_close("impl Foo {", "}", lambda b: b.line("fn bar(&self) {}"))
        .build()
    )
    assert code == "impl Foo {\n    fn bar(&self) {}\n}\n"


def test_block_without_close():
    code = CodeBuilder.rust().block("impl Foo {", lambda b: b.line("x")).line("y").build()
    assert code == "impl Foo {\n    x\ny\n"


def test_blank_line():
    code = CodeBuilder.rust().line("use std::io;").blank().line("fn main() {}").build()
    assert code == "use std::io;\n\nfn main() {}\n"


def test_doc_comment():
    code = CodeBuilder.rust().rust_doc("A test function").line("fn test() {}").build()
    assert code == "/// A test function\nfn test() {}\n"


def test_doc_with_prefix_is_indented():
    code = CodeBuilder.rust().indent().doc("#", "note").build()
    assert code == "    # note\n"


def test_conditional():
    with_debug = CodeBuilder.rust().when(True, lambda b: b.line("#[derive(Debug)]")).line("struct Foo;").build()
    without_debug = CodeBuilder.rust().when(False, lambda b: b.line("#[derive(Debug)]")).line("struct Foo;").build()
    assert with_debug == "#[derive(Debug)]\nstruct Foo;\n"
    assert without_debug == "struct Foo;\n"


def test_each():
    code = (
        CodeBuilder.rust()
        .line("enum Color {")
        .indent()
        .each(["Red", "Green", "Blue"], lambda b, color: b.line(f"{color},"))
        .dedent()
        .line("}")
        .build()
    )
    assert code == "enum Color {\n    Red,\n    Green,\n    Blue,\n}\n"


def test_typescript_indent():
    code = CodeBuilder.typescript().line("function foo() {").indent().line("return 1;").dedent().line("}").build()
    assert code == "function foo() {\n  return 1;\n}\n"


def test_go_indent():
    code = CodeBuilder.go().line("func main() {").indent().line("x := 1").dedent().line("}").build()
    assert code == "func main() {\n\tx := 1\n}\n"


def test_mutable_api_basic():
    builder = CodeBuilder.rust()
    builder.line("let x = 1;").blank().line("let y = 2;")
    assert builder.build() == "let x = 1;\n\nlet y = 2;\n"


def test_default_is_rust():
    assert CodeBuilder().indent().line("x").build() == "    x\n"
    assert CodeBuilder(Indent.spaces(2)).indent().line("x").build() == "  x\n"


def test_dedent_saturates_at_zero():
    builder = CodeBuilder.rust().dedent().dedent()
    assert builder.current_indent() == 0
    assert builder.line("x").build() == "x\n"


def test_current_indent_tracks_level():
    builder = CodeBuilder.rust().indent().indent()
    assert builder.current_indent() == 2
    builder.dedent()
    assert builder.current_indent() == 1


def test_raw_and_str():
    builder = CodeBuilder.rust().indent().raw("abc").raw("def")
    assert str(builder) == "abcdef"


def test_blank_has_no_indentation():
    assert CodeBuilder.rust().indent().blank().build() == "\n"


def test_emit_with_fragments():
    builder = CodeBuilder.rust()
    builder.emit(_Node([Line("// comment"), Line("let x = 1;")]))
    assert builder.build() == "// comment\nlet x = 1;\n"


def test_emit_block_fragment():
    builder = CodeBuilder.rust()
    builder.emit(_Node([Block("fn main() {", [Line('println!("Hello");')], "}")]))
    assert builder.build() == 'fn main() {\n    println!("Hello");\n}\n'


def test_emit_jsdoc_fragment():
    builder = CodeBuilder.typescript()
    builder.emit(_Node([JsDoc("A function"), Line("function foo() {}")]))
    assert builder.build() == "/** A function */\nfunction foo() {}\n"


def test_emit_nested_fragments():
    node = _Node(
        [
            RustDoc("Doc"),
            Block("mod a {", [Indented([Line("x")]), Sequence([Blank(), Raw("y")])]),
        ]
    )
    code = CodeBuilder.rust().emit(node).build()
    assert code == "/// Doc\nmod a {\n        x\n\ny"


def test_apply_fragment_rejects_unknown():
    with pytest.raises(TypeError):
        CodeBuilder.rust().apply_fragment("not a fragment")