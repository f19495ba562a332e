"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Each method returns a Diagnostic ready to be passed to a BajzelError.
    """

    # ------------------------------------------------------------------
    # Syntax (parser)
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_token(
        token: str, next_token: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """No statement form matches at a token.

        Args:
            token: Rendering of the offending token
            next_token: Rendering of the token after it (for context)
            span: Location of the offending token, if known

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        msg = f"Unexpected token {token}, next: {next_token}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=msg,
            span=span,
            hint="Check the statement starting at this token",
            received=token,
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source text exceeds the configured parser limit.

        Args:
            size: Source length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({limit:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure max_source_size in the FuzlParser constructor to increase limit",
        )

    # ------------------------------------------------------------------
    # Evaluation: statement ordering
    # ------------------------------------------------------------------

    @staticmethod
    def define_required() -> Diagnostic:
        """Program does not start with a DEFINE section.

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_ERROR,
            message="at least one DEFINE section is required",
            hint="Start the program with 'DEFINE <name>'",
        )

    @staticmethod
    def single_generate() -> Diagnostic:
        """Second GENERATE section in one program.

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_ERROR,
            message="single GENERATE section allowed",
        )

    @staticmethod
    def duplicate_group(name: str) -> Diagnostic:
        """DEFINE reuses an existing group name.

        Args:
            name: Group name

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        msg = f"DEFINE section '{name}' already exists"
        return Diagnostic(code=DiagnosticCode.SYNTAX_ERROR, message=msg)

    @staticmethod
    def duplicate_alias(alias: str, group: str) -> Diagnostic:
        """Field alias used twice in one group.

        Args:
            alias: Field alias
            group: Group containing both fields

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        msg = f"Field '{alias}' already defined in '{group}'"
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_ERROR,
            message=msg,
            hint="Field aliases must be unique within a DEFINE section",
        )

    @staticmethod
    def field_not_found(alias: str, group: str) -> Diagnostic:
        """Attribute update names a field the current group lacks.

        Args:
            alias: Field alias that was looked up
            group: Current group

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        msg = f"Field '{alias}' not found in '{group}'"
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_ERROR,
            message=msg,
            hint=f"Declare the field with 'AS {alias}' before updating it",
        )

    @staticmethod
    def no_current_field(attribute: str) -> Diagnostic:
        """Attribute update with no field selected.

        Args:
            attribute: Attribute name of the update

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        msg = f"{attribute}: no field selected for attribute update"
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_ERROR, message=msg, attribute=attribute
        )

    @staticmethod
    def unexpected_statement(statement: str, state: str) -> Diagnostic:
        """Statement not allowed in the current evaluator state.

        Args:
            statement: Statement description
            state: Evaluator state name

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        msg = f"{statement} is not allowed while {state}"
        return Diagnostic(code=DiagnosticCode.SYNTAX_ERROR, message=msg)

    @staticmethod
    def program_not_finished(state: str) -> Diagnostic:
        """Statements ran out outside the final state.

        Args:
            state: Evaluator state name at end of input

        Returns:
            Diagnostic for PROGRAM_NOT_FINISHED
        """
        msg = f"program not finished (stopped while {state})"
        return Diagnostic(
            code=DiagnosticCode.PROGRAM_NOT_FINISHED,
            message=msg,
            hint="End the program with a 'GENERATE <name> WITH' section",
        )

    # ------------------------------------------------------------------
    # Evaluation: fields and attributes
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_type_name(name: str) -> Diagnostic:
        """Type name has no field format.

        Args:
            name: Type name as written

        Returns:
            Diagnostic for CONVERSION_FAILED
        """
        msg = f"Unknown type name ({name})"
        return Diagnostic(code=DiagnosticCode.CONVERSION_FAILED, message=msg)

    @staticmethod
    def unsupported_field_type(kind: str) -> Diagnostic:
        """Variable field declared with a kind the evaluator cannot build.

        Args:
            kind: Type name as written

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        msg = f"Unsupported variable field type ({kind})"
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_ERROR,
            message=msg,
            hint="Type names are matched case-sensitively, e.g. 'u32', 'le_i16', 'string'",
        )

    @staticmethod
    def literal_field_not_implemented(kind: str) -> Diagnostic:
        """Constant field from a literal kind without a field definition.

        Args:
            kind: Literal kind ("bytes" or "reserved")

        Returns:
            Diagnostic for FEATURE_NOT_IMPLEMENTED
        """
        msg = f"constant {kind} literal fields are not implemented"
        return Diagnostic(code=DiagnosticCode.FEATURE_NOT_IMPLEMENTED, message=msg)

    @staticmethod
    def attributes_not_allowed(kind: str) -> Diagnostic:
        """Attribute update on a field kind without attributes.

        Args:
            kind: Field kind name

        Returns:
            Diagnostic for INVALID_ATTRIBUTE
        """
        msg = f"'{kind}' fields do not have any attributes"
        return Diagnostic(code=DiagnosticCode.INVALID_ATTRIBUTE, message=msg)

    @staticmethod
    def unsupported_attribute(attribute: str, kind: str) -> Diagnostic:
        """Attribute name not in a field kind's vocabulary.

        Args:
            attribute: Attribute name as written
            kind: Field kind name

        Returns:
            Diagnostic for INVALID_ATTRIBUTE
        """
        msg = f"unsupported {kind} attribute ({attribute})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ATTRIBUTE, message=msg, attribute=attribute
        )

    @staticmethod
    def invalid_attribute_value(attribute: str, usage: str, problem: str) -> Diagnostic:
        """Attribute called with wrong arity or out-of-range arguments.

        Args:
            attribute: Attribute name
            usage: Usage form, e.g. "LEN(min max)"
            problem: Violated expectation, e.g. "min > max is not allowed"

        Returns:
            Diagnostic for INVALID_ATTRIBUTE
        """
        msg = f"{usage}: {problem}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ATTRIBUTE,
            message=msg,
            attribute=attribute,
            expected=usage,
        )

    @staticmethod
    def value_out_of_format(
        attribute: str, value: int, format_name: str, lower: int, upper: int
    ) -> Diagnostic:
        """Range bound outside the field's natural numeric range.

        Args:
            attribute: Attribute name
            value: Offending bound
            format_name: Numeric format, e.g. "u8"
            lower: Natural minimum of the format
            upper: Natural maximum of the format

        Returns:
            Diagnostic for INVALID_ATTRIBUTE
        """
        msg = f"{attribute}: {value} does not fit {format_name} [{lower}, {upper}]"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ATTRIBUTE,
            message=msg,
            attribute=attribute,
            expected=f"[{lower}, {upper}]",
            received=str(value),
        )

    @staticmethod
    def unknown_display_format(name: str) -> Diagnostic:
        """FORMAT attribute with an unknown display format.

        Args:
            name: Display format as written

        Returns:
            Diagnostic for INVALID_ATTRIBUTE
        """
        msg = f"FORMAT(name): unknown display format ({name})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ATTRIBUTE,
            message=msg,
            attribute="FORMAT",
            expected="bin, oct, dec or hex",
            received=name,
        )

    # ------------------------------------------------------------------
    # Evaluation: generator parameters
    # ------------------------------------------------------------------

    @staticmethod
    def unsupported_parameter(name: str) -> Diagnostic:
        """Unknown generator parameter.

        Args:
            name: Parameter name as written

        Returns:
            Diagnostic for INVALID_PARAMETER
        """
        msg = f"unsupported generator parameter ({name})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PARAMETER,
            message=msg,
            attribute=name,
            hint="Supported parameters: OUT_MIN, OUT_MAX, TERM",
        )

    @staticmethod
    def invalid_parameter_value(name: str, problem: str) -> Diagnostic:
        """Generator parameter assigned an unusable value.

        Args:
            name: Parameter name
            problem: Violated expectation

        Returns:
            Diagnostic for INVALID_PARAMETER
        """
        msg = f"{name}: {problem}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PARAMETER, message=msg, attribute=name
        )

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    @staticmethod
    def group_not_expected(context: str) -> Diagnostic:
        """Parenthesized group where a single literal was required.

        Args:
            context: Where the expression appeared

        Returns:
            Diagnostic for EXPRESSION_INVALID
        """
        msg = f"{context}: group expression not expected"
        return Diagnostic(
            code=DiagnosticCode.EXPRESSION_INVALID,
            message=msg,
            expected="single literal",
            received="group",
        )

    @staticmethod
    def integer_expected(context: str, received: str) -> Diagnostic:
        """Non-integer literal where an integer was required.

        Args:
            context: Where the expression appeared
            received: Kind of literal found

        Returns:
            Diagnostic for EXPRESSION_INVALID
        """
        msg = f"{context}: integer literal expected, got {received}"
        return Diagnostic(
            code=DiagnosticCode.EXPRESSION_INVALID,
            message=msg,
            expected="integer",
            received=received,
        )

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    @staticmethod
    def group_missing(name: str) -> Diagnostic:
        """Generator target names no group.

        Args:
            name: Target group name

        Returns:
            Diagnostic for NOT_CONSTRUCTED_PROPERLY
        """
        msg = f"not constructed properly: DEFINE section '{name}' is missing"
        return Diagnostic(code=DiagnosticCode.NOT_CONSTRUCTED_PROPERLY, message=msg)

    @staticmethod
    def generator_missing() -> Diagnostic:
        """Environment without a generator definition.

        Returns:
            Diagnostic for NOT_CONSTRUCTED_PROPERLY
        """
        return Diagnostic(
            code=DiagnosticCode.NOT_CONSTRUCTED_PROPERLY,
            message="not constructed properly: GENERATE section is missing",
        )
