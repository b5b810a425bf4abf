from __future__ import annotations


AUTODETECT = "autodetect"

# Language identifiers accepted by the Pastery API (Pygments lexer aliases).
LANGUAGES = frozenset(
    {
        AUTODETECT,
        "text",
        "ada",
        "antlr",
        "apacheconf",
        "applescript",
        "arduino",
        "asm",
        "awk",
        "bash",
        "bat",
        "bbcode",
        "c",
        "ceylon",
        "cfm",
        "clojure",
        "cmake",
        "coffee-script",
        "common-lisp",
        "console",
        "cpp",
        "csharp",
        "css",
        "cucumber",
        "cython",
        "d",
        "dart",
        "delphi",
        "diff",
        "django",
        "docker",
        "dylan",
        "elixir",
        "elm",
        "erb",
        "erlang",
        "fortran",
        "fsharp",
        "gas",
        "genshi",
        "glsl",
        "gnuplot",
        "go",
        "groovy",
        "haml",
        "handlebars",
        "haskell",
        "haxe",
        "html",
        "http",
        "idris",
        "ini",
        "io",
        "irc",
        "java",
        "javascript",
        "jinja",
        "json",
        "jsx",
        "julia",
        "kotlin",
        "less",
        "lighttpd",
        "llvm",
        "lua",
        "make",
        "mako",
        "markdown",
        "mathematica",
        "matlab",
        "mysql",
        "nasm",
        "nginx",
        "nim",
        "nix",
        "objective-c",
        "ocaml",
        "perl",
        "perl6",
        "php",
        "plpgsql",
        "postgresql",
        "powershell",
        "prolog",
        "properties",
        "protobuf",
        "psql",
        "puppet",
        "pycon",
        "python",
        "python2",
        "pytb",
        "r",
        "racket",
        "rb",
        "rst",
        "ruby",
        "rust",
        "sass",
        "scala",
        "scheme",
        "scss",
        "smalltalk",
        "sql",
        "sqlite3",
        "swift",
        "tcl",
        "tcsh",
        "tex",
        "toml",
        "ts",
        "twig",
        "typescript",
        "vala",
        "vb.net",
        "verilog",
        "vhdl",
        "vim",
        "xml",
        "xquery",
        "xslt",
        "yaml",
        "zig",
    }
)


def resolve_language(alias: str) -> str:
    """Return the registry entry for ``alias``, or ``autodetect`` if unknown."""
    if alias in LANGUAGES:
        return alias
    return AUTODETECT
