from __future__ import annotations

MINO_VERSION = "0.1.0"
DEFAULT_TAB_STOP = 4
HISTORY_DEPTH = 50
MINO_QUIT_TIMES = 3
MINO_CLOSE_TIMES = 3
MINO_STATUS_TIMEOUT = 5

# Syntax highlight classes.
HL_NORMAL = 0
HL_NUMBER = 1
HL_STRING = 2
HL_COMMENT = 3
HL_KEYWORD = 4
HL_FLOWWORD = 5
HL_TYPE = 6
HL_METAWORD = 7
HL_IDENT = 8
HL_FUNCTION = 9
HL_PATH = 10

# Overlay classes, painted on top of the syntax class.
OV_NORMAL = 0
OV_MATCH = 1
OV_SELECTED = 2

HL_HIGHLIGHT_NUMBERS = 1 << 0
HL_HIGHLIGHT_STRINGS = 1 << 1
HL_HIGHLIGHT_IDENTS = 1 << 2
HL_NESTED_COMMENTS = 1 << 3
HL_CAPITAL_TYPES = 1 << 4

LANG_UNKNOWN = 0
LANG_C = 1
LANG_RUST = 2
LANG_PYTHON = 3

DIFF_INSERT = "insert"
DIFF_REMOVE = "remove"

C_HL_EXTENSIONS = (".c", ".h", ".cpp", ".hpp", ".cc")
C_HL_KEYWORDS = (
    "auto",
    "enum",
    "extern",
    "register",
    "sizeof",
    "static",
    "struct",
    "typedef",
    "union",
    "volatile",
    "NULL",
    # C++ keywords.
    "alignas",
    "alignof",
    "class",
    "constexpr",
    "const_cast",
    "decltype",
    "delete",
    "dynamic_cast",
    "explicit",
    "export",
    "false",
    "friend",
    "inline",
    "mutable",
    "namespace",
    "new",
    "noexcept",
    "nullptr",
    "operator",
    "private",
    "protected",
    "public",
    "reinterpret_cast",
    "static_assert",
    "static_cast",
    "template",
    "this",
    "thread_local",
    "true",
    "typeid",
    "typename",
    "using",
    "virtual",
)
C_HL_FLOWWORDS = (
    "break",
    "case",
    "catch",
    "continue",
    "default",
    "do",
    "else",
    "for",
    "goto",
    "if",
    "return",
    "switch",
    "throw",
    "try",
    "while",
)
C_HL_TYPES = (
    "int",
    "long",
    "double",
    "float",
    "char",
    "unsigned",
    "signed",
    "void",
    "short",
    "const",
    "bool",
    "size_t",
)
C_HL_METAWORDS = (
    "#include",
    "#define",
    "#undef",
    "#ifdef",
    "#ifndef",
    "#if",
    "#elif",
    "#else",
    "#endif",
    "#pragma",
)
C_HL_PATH_DELIMS = ("::",)

RUST_HL_EXTENSIONS = (".rs",)
RUST_HL_KEYWORDS = (
    "as",
    "const",
    "crate",
    "dyn",
    "enum",
    "extern",
    "false",
    "fn",
    "impl",
    "let",
    "mod",
    "move",
    "mut",
    "pub",
    "ref",
    "self",
    "Self",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "type",
    "unsafe",
    "use",
    "where",
)
RUST_HL_FLOWWORDS = (
    "async",
    "await",
    "break",
    "continue",
    "else",
    "for",
    "if",
    "in",
    "loop",
    "match",
    "return",
    "while",
)
RUST_HL_TYPES = (
    "i8",
    "i16",
    "i32",
    "i64",
    "i128",
    "isize",
    "u8",
    "u16",
    "u32",
    "u64",
    "u128",
    "usize",
    "f32",
    "f64",
    "bool",
    "char",
    "str",
)
RUST_HL_METAWORDS = (
    "println!",
    "print!",
    "eprintln!",
    "format!",
    "vec!",
    "panic!",
    "assert!",
    "assert_eq!",
    "write!",
    "macro_rules!",
)
RUST_HL_PATH_DELIMS = ("::",)

PYTHON_HL_EXTENSIONS = (".py", ".pyi")
PYTHON_HL_KEYWORDS = (
    "and",
    "as",
    "class",
    "def",
    "del",
    "False",
    "from",
    "global",
    "import",
    "in",
    "is",
    "lambda",
    "None",
    "nonlocal",
    "not",
    "or",
    "self",
    "True",
)
PYTHON_HL_FLOWWORDS = (
    "assert",
    "async",
    "await",
    "break",
    "continue",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "if",
    "pass",
    "raise",
    "return",
    "try",
    "while",
    "with",
    "yield",
)
PYTHON_HL_TYPES = (
    "int",
    "float",
    "str",
    "bytes",
    "bool",
    "list",
    "dict",
    "set",
    "tuple",
    "object",
)
PYTHON_HL_METAWORDS = ("@property", "@staticmethod", "@classmethod", "@dataclass")
