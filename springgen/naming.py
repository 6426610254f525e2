"""Module-name derivation.

Turns the free-text module name typed by the user (``"order item"``,
``"product-line"``) into the identifier variants every generated file refers
to.  The variants are computed exactly once per run and then threaded
through all renderers, so the controller, service, repository and entity
files can never disagree about a type name.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .errors import InvalidModuleNameError


# ---------------------------------------------------------------------------
# Java reserved words (cannot be used as a package segment)
# ---------------------------------------------------------------------------

JAVA_KEYWORDS: frozenset[str] = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch",
    "char", "class", "const", "continue", "default", "do", "double", "else",
    "enum", "extends", "false", "final", "finally", "float", "for", "goto",
    "if", "implements", "import", "instanceof", "int", "interface", "long",
    "native", "new", "null", "package", "private", "protected", "public",
    "return", "short", "static", "strictfp", "super", "switch",
    "synchronized", "this", "throw", "throws", "transient", "true", "try",
    "void", "volatile", "while", "_",
})

# Simple type names the generated sources import or use unqualified.  A
# generated type with one of these names would clash inside its own file.
GENERATED_SOURCE_IMPORTS: frozenset[str] = frozenset({
    # java.lang
    "Long", "Object", "String", "Void",
    # java.util
    "List", "Optional",
    # Spring Boot / Spring context
    "Bean", "Configuration", "SpringApplication", "SpringBootApplication",
    # Spring Web
    "DeleteMapping", "GetMapping", "HttpStatus", "PathVariable", "PostMapping",
    "PutMapping", "RequestBody", "RequestMapping", "ResponseEntity", "RestController",
    # Spring Data / stereotypes
    "JpaRepository", "Repository", "Service",
    # Jakarta Persistence
    "Entity", "GeneratedValue", "GenerationType", "Id",
    # Lombok
    "AllArgsConstructor", "Data", "NoArgsConstructor",
    # OpenAPI models
    "Components", "Info", "OpenAPI", "SecurityRequirement", "SecurityScheme", "Server",
})


# ---------------------------------------------------------------------------
# Variants model
# ---------------------------------------------------------------------------


class ModuleNameVariants(BaseModel):
    """The naming variants derived from one module name.

    Attributes:
        pascal: ``OrderItem`` -- entity type name and type-name prefix.
        camel: ``orderItem`` -- package segment and variable names.
        plural_pascal: ``OrderItems`` -- used in handler names.
        plural_camel: ``orderItems`` -- REST base path and list variables.
    """

    model_config = ConfigDict(frozen=True)

    pascal: str
    camel: str
    plural_pascal: str
    plural_camel: str

    # -- Cross-file type names ---------------------------------------------

    @property
    def entity_type(self) -> str:
        return self.pascal

    @property
    def repository_type(self) -> str:
        return f"{self.pascal}Repository"

    @property
    def service_type(self) -> str:
        return f"{self.pascal}Service"

    @property
    def controller_type(self) -> str:
        return f"{self.pascal}Controller"

    @property
    def repository_field(self) -> str:
        return f"{self.camel}Repository"

    @property
    def service_field(self) -> str:
        return f"{self.camel}Service"

    def module_package(self, base_package: str) -> str:
        """Return the Java package that holds this module's sources."""
        return f"{base_package}.{self.camel}"


# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------


def to_pascal(raw: str) -> str:
    """Convert free text to PascalCase.

    Every character that is not a letter or digit is a word boundary: it is
    dropped and the next letter/digit is upper-cased.  All other letters are
    lower-cased, so ``"ORDER item"`` becomes ``"OrderItem"``.
    """
    result: list[str] = []
    capitalize_next = True
    for char in raw:
        if char.isalnum():
            result.append(char.upper() if capitalize_next else char.lower())
            capitalize_next = False
        else:
            capitalize_next = True
    return "".join(result)


def to_camel(pascal: str) -> str:
    """Lower-case the first character of *pascal* (no-op for ``""``)."""
    if not pascal:
        return ""
    return pascal[0].lower() + pascal[1:]


def derive(raw: str) -> ModuleNameVariants:
    """Derive all naming variants from a raw module name.

    Plurals are formed by appending ``s``; irregular plurals are not handled.
    Input without any letter or digit yields empty variants -- callers must
    reject it with :func:`validate_module_name` before rendering.
    """
    pascal = to_pascal(raw)
    camel = to_camel(pascal)
    return ModuleNameVariants(
        pascal=pascal,
        camel=camel,
        plural_pascal=f"{pascal}s" if pascal else "",
        plural_camel=f"{camel}s" if camel else "",
    )


def validate_module_name(variants: ModuleNameVariants, raw: str = "") -> ModuleNameVariants:
    """Reject variants that would produce malformed Java sources.

    Raises:
        InvalidModuleNameError: If the name is empty after derivation, starts
            with a digit, its camelCase form is a Java reserved word, or one
            of the generated type names clashes with a type the generated
            sources import.
    """
    if not variants.pascal:
        raise InvalidModuleNameError(raw, "it contains no letters or digits")
    if variants.pascal[0].isdigit():
        raise InvalidModuleNameError(raw, "a Java type name cannot start with a digit")
    if variants.camel in JAVA_KEYWORDS:
        raise InvalidModuleNameError(
            raw, f"'{variants.camel}' is a reserved word and cannot be a package name"
        )
    generated_types = (
        variants.entity_type,
        variants.repository_type,
        variants.service_type,
        variants.controller_type,
    )
    for type_name in generated_types:
        if type_name in GENERATED_SOURCE_IMPORTS:
            raise InvalidModuleNameError(
                raw, f"the generated type '{type_name}' clashes with an imported type"
            )
    return variants
