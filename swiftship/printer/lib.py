"""Swift printer: renders IR declarations as Swift source text.

Printing is purely syntactic. Every IR variant has exactly one rule and
an unknown shape raises ``UnrenderableExpression``; nothing is skipped.

Output conventions:
    - four-space indentation
    - one view or modifier per line, modifiers indented under their view
    - a final unlabeled closure argument is printed as a trailing closure
    - every file ends with a single newline
"""

from typing import Never, NoReturn

from swiftship.core.errors import UnrenderableExpression
from swiftship.ir import (
    ActionBlock,
    Argument,
    ArrayLit,
    Assign,
    BindingRef,
    BoolLit,
    Call,
    Conditional,
    Container,
    EntryFile,
    EnumCase,
    HelperFunc,
    Identifier,
    Labeled,
    Leaf,
    ModelFile,
    Modified,
    ModifierExpr,
    NumberLit,
    RangeLit,
    RouteRef,
    StateDecl,
    StringLit,
    UiExpr,
    ValueExpr,
    ViewFile,
)
from swiftship.tokens import TokenValue, swift_number

INDENT = "    "

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r", "\0": "\\0"}


def swift_string(text: str) -> str:
    """Quote text as a Swift string literal."""
    out = []
    for char in text:
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{{{ord(char):X}}}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


def _unrenderable(expr: Never) -> NoReturn:
    """Like ``assert_never``: a type checker flags any IR variant left unmatched.

    A shape outside the closed IR still reaches this at runtime and raises
    ``UnrenderableExpression``.
    """
    raise UnrenderableExpression(f"No print rule for {type(expr).__name__}: {expr!r}")


def _split_trailing(
    arguments: tuple[Argument, ...],
) -> tuple[tuple[Argument, ...], ActionBlock | None]:
    """Separate a final unlabeled closure so it can trail the call."""
    if arguments and arguments[-1].label is None:
        last = arguments[-1].value
        if isinstance(last, ActionBlock):
            return arguments[:-1], last
    return arguments, None


class SwiftPrinter:
    """Renders IR as Swift source.

    Example:
        >>> printer = SwiftPrinter()
        >>> printer.value(RangeLit(NumberLit(0), NumberLit(10)))
        '0...10'
    """

    def __init__(self, indent: str = INDENT):
        self.indent = indent

    # =========================================================================
    # Values
    # =========================================================================

    def value(self, expr: ValueExpr) -> str:
        """Render a value expression on one line."""
        match expr:
            case StringLit(value=text):
                return swift_string(text)
            case NumberLit(value=number):
                return swift_number(number)
            case BoolLit(value=flag):
                return "true" if flag else "false"
            case EnumCase(name=name):
                return f".{name}"
            case Identifier(name=name):
                return name
            case TokenValue(expr=code):
                return code
            case BindingRef():
                return self.binding(expr)
            case Call(callee=callee, arguments=arguments):
                return f"{callee}({self.arguments(arguments)})"
            case ArrayLit(items=items):
                return "[" + ", ".join(self.value(item) for item in items) + "]"
            case RangeLit(lower=lower, upper=upper):
                return f"{self.value(lower)}...{self.value(upper)}"
            case RouteRef(case=case):
                return f"AppRoute.{case}"
            case ActionBlock(statements=statements):
                if not statements:
                    return "{}"
                return "{ " + "; ".join(self.statement(s) for s in statements) + " }"
            case unreachable:
                _unrenderable(unreachable)

    def binding(self, ref: BindingRef) -> str:
        if ref.two_way:
            return f"${ref.path}"
        if ref.interpolate:
            return f'"\\({ref.path})"'
        return ref.path

    def statement(self, statement: Call | Assign) -> str:
        match statement:
            case Call():
                return self.value(statement)
            case Assign(target=target, value=value):
                return f"{target} = {self.value(value)}"
            case unreachable:
                _unrenderable(unreachable)

    def arguments(self, arguments: tuple[Argument, ...]) -> str:
        parts = []
        for argument in arguments:
            rendered = self.value(argument.value)
            parts.append(f"{argument.label}: {rendered}" if argument.label else rendered)
        return ", ".join(parts)

    # =========================================================================
    # Views
    # =========================================================================

    def view(self, expr: UiExpr, level: int = 0) -> list[str]:
        """Render a view expression as lines at an indentation level."""
        pad = self.indent * level
        match expr:
            case Leaf(kind=kind, value=value, arguments=arguments):
                arguments, trailing = _split_trailing(arguments)
                parts = [] if value is None else [self.value(value)]
                if arguments:
                    parts.append(self.arguments(arguments))
                if trailing is None:
                    return [f"{pad}{kind}({', '.join(parts)})"]
                head = f"{kind}({', '.join(parts)})" if parts else kind
                return self._closure(pad + head, trailing, level)
            case Container(
                kind=kind, children=children, layout_params=params, labeled=labeled
            ):
                head = f"{kind}({self.arguments(params)})" if params else kind
                if not children and not labeled:
                    return [f"{pad}{head} {{}}"]
                lines = [f"{pad}{head} {{"]
                lines.extend(self._children(children, level + 1))
                lines.extend(self._labeled(labeled, level))
                lines.append(f"{pad}}}")
                return lines
            case Modified(inner=inner, modifiers=modifiers):
                lines = self.view(inner, level)
                for modifier in modifiers:
                    lines.extend(self.modifier(modifier, level + 1))
                return lines
            case Conditional(on=on, then=then, otherwise=otherwise):
                lines = [f"{pad}if {on.path} {{"]
                lines.extend(self.view(then, level + 1))
                if otherwise is not None:
                    lines.append(f"{pad}}} else {{")
                    lines.extend(self.view(otherwise, level + 1))
                lines.append(f"{pad}}}")
                return lines
            case unreachable:
                _unrenderable(unreachable)

    def modifier(self, modifier: ModifierExpr, level: int) -> list[str]:
        """Render ``.name(args)`` with its optional content closure."""
        pad = self.indent * level
        arguments, trailing = _split_trailing(modifier.arguments)
        call = f".{modifier.name}({self.arguments(arguments)})"
        if trailing is not None:
            head = call if arguments else f".{modifier.name}"
            return self._closure(pad + head, trailing, level)
        if modifier.content is None:
            return [pad + call]
        head = call if arguments else f".{modifier.name}"
        opener = f"{pad}{head} {{"
        if modifier.parameter:
            opener += f" {modifier.parameter} in"
        lines = [opener]
        lines.extend(self._children(modifier.content, level + 1))
        lines.extend(self._labeled(modifier.labeled, level))
        lines.append(f"{pad}}}")
        return lines

    def _children(self, children: tuple[UiExpr, ...], level: int) -> list[str]:
        lines = []
        for child in children:
            lines.extend(self.view(child, level))
        return lines

    def _labeled(self, labeled: tuple[Labeled, ...], level: int) -> list[str]:
        """Additional trailing closures (``} header: {``)."""
        pad = self.indent * level
        lines = []
        for closure in labeled:
            lines.append(f"{pad}}} {closure.label}: {{")
            lines.extend(self._children(closure.children, level + 1))
        return lines

    def _closure(self, head: str, block: ActionBlock, level: int) -> list[str]:
        if not block.statements:
            return [f"{head} {{}}"]
        inner = self.indent * (level + 1)
        lines = [f"{head} {{"]
        lines.extend(inner + self.statement(s) for s in block.statements)
        lines.append(self.indent * level + "}")
        return lines

    # =========================================================================
    # Files
    # =========================================================================

    def _imports(self, imports: tuple[str, ...]) -> list[str]:
        if not imports:
            return []
        return [f"import {name}" for name in sorted(imports)] + [""]

    def _body(self, body: UiExpr, keyword: str = "View") -> list[str]:
        lines = [f"{self.indent}var body: some {keyword} {{"]
        lines.extend(self.view(body, 2))
        lines.append(f"{self.indent}}}")
        return lines

    def _helper(self, helper: HelperFunc) -> list[str]:
        pad = self.indent
        lines = [f"{pad}private func {helper.name}() {{"]
        lines.extend(
            f"{pad * 2}// {name}: {self.value(value)}" for name, value in helper.parameters
        )
        lines.append(f"{pad}}}")
        return lines

    def print_view_file(self, view: ViewFile) -> str:
        """A screen's view file, with a ``#Preview``."""
        pad = self.indent
        lines = self._imports(view.imports)
        lines.append(f"struct {view.name}: View {{")
        declarations = [
            *(
                f"{pad}var {param.name}: {param.swift_type} = {self.value(param.default)}"
                for param in view.parameters
            ),
            *(
                f"{pad}@Environment(\\.{env.key}) private var {env.name}"
                for env in view.environment
            ),
            *(self._state(state) for state in view.state),
        ]
        if declarations:
            lines.extend(declarations)
            lines.append("")
        lines.extend(self._body(view.body))
        for helper in view.helpers:
            lines.append("")
            lines.extend(self._helper(helper))
        lines.append("}")
        lines.extend(["", "#Preview {", f"{pad}{view.name}()", "}"])
        return "\n".join(lines) + "\n"

    def _state(self, state: StateDecl) -> str:
        name = state.name
        if state.swift_type is not None:
            name = f"{name}: {state.swift_type}"
        return f"{self.indent}@State private var {name} = {self.value(state.initial)}"

    def model_lines(self, model: ModelFile) -> list[str]:
        """A model declaration without imports."""
        pad = self.indent
        if not model.persisted:
            lines = [f"struct {model.name}: Identifiable {{"]
            if all(prop.name != "id" for prop in model.properties):
                lines.append(f"{pad}var id = UUID()")
            lines.extend(
                f"{pad}var {prop.name}: {prop.swift_type} = {self.value(prop.default)}"
                for prop in model.properties
            )
            lines.append("}")
            return lines

        stored = [prop for prop in model.properties if not prop.transient]
        lines = ["@Model", f"final class {model.name} {{"]
        for prop in model.properties:
            if prop.transient:
                lines.append(
                    f"{pad}@Transient var {prop.name}: {prop.swift_type} = "
                    f"{self.value(prop.default)}"
                )
            else:
                lines.append(f"{pad}var {prop.name}: {prop.swift_type}")
        lines.append("")
        if stored:
            params = ", ".join(
                f"{prop.name}: {prop.swift_type} = {self.value(prop.default)}"
                for prop in stored
            )
            lines.append(f"{pad}init({params}) {{")
            lines.extend(f"{pad * 2}self.{prop.name} = {prop.name}" for prop in stored)
            lines.append(f"{pad}}}")
        else:
            lines.append(f"{pad}init() {{}}")
        lines.append("}")
        return lines

    def print_model_file(self, model: ModelFile) -> str:
        lines = self._imports(model.imports) + self.model_lines(model)
        return "\n".join(lines) + "\n"

    def print_entry_file(self, entry: EntryFile) -> str:
        """The ``@main`` app file with root view, routes and model structs."""
        pad = self.indent
        lines = self._imports(entry.imports)
        lines.extend(["@main", f"struct {entry.app_name}: App {{"])
        lines.append(f"{pad}var body: some Scene {{")
        lines.append(f"{pad * 2}WindowGroup {{")
        lines.append(f"{pad * 3}RootView()")
        for modifier in entry.scene_modifiers:
            lines.extend(self.modifier(modifier, 4))
        lines.append(f"{pad * 2}}}")
        if entry.persisted_models:
            models = ", ".join(f"{name}.self" for name in entry.persisted_models)
            lines.append(f"{pad * 2}.modelContainer(for: [{models}])")
        lines.extend([f"{pad}}}", "}", ""])

        lines.append("struct RootView: View {")
        lines.extend(self._body(entry.root))
        lines.append("}")

        if entry.routes:
            lines.extend(["", "enum AppRoute: Hashable {"])
            lines.extend(f"{pad}case {route.case}" for route in entry.routes)
            lines.extend(["}", "", "struct RouteDestination: View {"])
            lines.extend([f"{pad}let route: AppRoute", ""])
            lines.append(f"{pad}var body: some View {{")
            lines.append(f"{pad * 2}switch route {{")
            for route in entry.routes:
                lines.append(f"{pad * 2}case .{route.case}:")
                lines.append(f"{pad * 3}{route.view}()")
            lines.extend([f"{pad * 2}}}", f"{pad}}}", "}"])

        for model in entry.models:
            lines.append("")
            lines.extend(self.model_lines(model))
        return "\n".join(lines) + "\n"

    def print_expr(self, expr: UiExpr) -> str:
        return "\n".join(self.view(expr)) + "\n"


_PRINTER = SwiftPrinter()


def print_view_file(view: ViewFile) -> str:
    """Render a view file with the default printer."""
    return _PRINTER.print_view_file(view)


def print_model_file(model: ModelFile) -> str:
    return _PRINTER.print_model_file(model)


def print_entry_file(entry: EntryFile) -> str:
    return _PRINTER.print_entry_file(entry)


def print_expr(expr: UiExpr) -> str:
    return _PRINTER.print_expr(expr)


__all__ = [
    "INDENT",
    "SwiftPrinter",
    "swift_string",
    "print_view_file",
    "print_model_file",
    "print_entry_file",
    "print_expr",
]
