"""Static per-language rule tables for block (code fence) and line (raw view) highlighting"""

import re
from types import MappingProxyType

from docview.core.highlight.tokens import Category, Rule


LANGUAGE_ALIASES = MappingProxyType({
    'js': 'javascript', 'ts': 'javascript', 'jsx': 'javascript', 'tsx': 'javascript',
    'mjs': 'javascript', 'cjs': 'javascript',
    'sh': 'bash', 'zsh': 'bash',
    'py': 'python',
    'rs': 'rust',
    'yml': 'yaml',
    'htm': 'html', 'xml': 'html', 'svg': 'html',
    'scss': 'css', 'less': 'css',
})

# Fence tags that get highlighted inside markdown; anything else is escaped verbatim.
FENCE_LANGUAGES = frozenset({
    'javascript', 'js', 'ts', 'tsx', 'jsx', 'python', 'py',
    'bash', 'sh', 'json', 'go', 'rust', 'rs',
})

BLOCK_CLASSES = MappingProxyType({c: f'hljs-{c.value}' for c in Category})

LINE_CLASSES = MappingProxyType({
    Category.comment:  'tok-cm',
    Category.string:   'tok-str',
    Category.keyword:  'tok-kw',
    Category.number:   'tok-num',
    Category.attr:     'tok-key',
    Category.title:    'tok-fn',
    Category.built_in: 'tok-bi',
})


def _words(*words: str, flags: int = 0) -> re.Pattern:
    return re.compile(r'\b(?:' + '|'.join(words) + r')\b', flags)


KEYWORDS = MappingProxyType({
    'javascript': (
        'function', 'const', 'let', 'var', 'return', 'if', 'else', 'for', 'while', 'class',
        'new', 'this', 'import', 'export', 'from', 'of', 'in', 'typeof', 'instanceof',
        'async', 'await', 'try', 'catch', 'throw', 'switch', 'case', 'break', 'continue',
        'default', 'yield', 'delete', 'void', 'null', 'undefined', 'true', 'false',
    ),
    'python': (
        'def', 'class', 'return', 'if', 'elif', 'else', 'for', 'while', 'import', 'from',
        'as', 'with', 'try', 'except', 'raise', 'in', 'not', 'and', 'or', 'is', 'None',
        'True', 'False', 'self', 'lambda', 'yield', 'pass', 'break', 'continue', 'finally',
        'global', 'nonlocal', 'assert', 'del',
    ),
    'bash': (
        'echo', 'for', 'do', 'done', 'if', 'then', 'fi', 'else', 'elif', 'in', 'function',
        'local', 'export', 'source', 'cd', 'ls', 'mkdir', 'rm', 'cp', 'mv', 'cat', 'grep',
        'awk', 'sed', 'chmod', 'chown', 'while', 'case', 'esac', 'read', 'shift', 'set', 'unset',
    ),
    'go': (
        'func', 'var', 'const', 'type', 'struct', 'interface', 'return', 'if', 'else', 'for',
        'range', 'switch', 'case', 'break', 'continue', 'default', 'package', 'import',
        'defer', 'go', 'chan', 'select', 'map', 'make', 'new', 'nil', 'true', 'false',
    ),
    'rust': (
        'fn', 'let', 'mut', 'const', 'if', 'else', 'for', 'while', 'loop', 'match', 'return',
        'struct', 'enum', 'impl', 'trait', 'pub', 'use', 'mod', 'self', 'super', 'crate',
        'where', 'async', 'await', 'move', 'unsafe', 'extern', 'type', 'true', 'false',
        'None', 'Some', 'Ok', 'Err',
    ),
})

BUILT_INS = MappingProxyType({
    'javascript': (
        'console', 'JSON', 'Math', 'Object', 'Array', 'Promise', 'String', 'Number',
        'Boolean', 'Date', 'Error', 'Map', 'Set', 'RegExp', 'Symbol', 'require', 'module',
    ),
    'python': (
        'print', 'len', 'range', 'str', 'int', 'float', 'bool', 'list', 'dict', 'set',
        'tuple', 'open', 'isinstance', 'super', 'enumerate', 'zip', 'map', 'filter',
        'sorted', 'min', 'max', 'sum', 'abs', 'any', 'all', 'type',
    ),
})

_C_COMMENT = Rule(re.compile(r'//.*$|/\*[\s\S]*?\*/', re.MULTILINE), Category.comment)
_HASH_COMMENT = Rule(re.compile(r'#.*$', re.MULTILINE), Category.comment)
_PY_COMMENT = Rule(re.compile(r'#.*$|"""[\s\S]*?"""|\'\'\'[\s\S]*?\'\'\'', re.MULTILINE), Category.comment)
_STRING = Rule(re.compile(r'"(?:\\.|[^"\\\n])*"|\'(?:\\.|[^\'\\\n])*\''), Category.string)
_NUMBER = Rule(re.compile(r'\b\d+(?:\.\d+)?\b'), Category.number)


def _block_rules(lang: str, comment: Rule | None) -> tuple[Rule, ...]:
    rules = [comment] if comment else []
    rules.append(_STRING)
    rules.append(Rule(_words(*KEYWORDS[lang]), Category.keyword))
    if lang in BUILT_INS:
        rules.append(Rule(_words(*BUILT_INS[lang]), Category.built_in))
    rules.append(_NUMBER)
    return tuple(rules)


BLOCK_RULES = MappingProxyType({
    'javascript': _block_rules('javascript', _C_COMMENT),
    'python':     _block_rules('python', _PY_COMMENT),
    'bash':       _block_rules('bash', _HASH_COMMENT),
    'go':         _block_rules('go', _C_COMMENT),
    'rust':       _block_rules('rust', _C_COMMENT),
    'json': (
        Rule(re.compile(r'("(?:\\.|[^"\\\n])*")\s*:'), Category.attr, group=1),
        Rule(re.compile(r'"(?:\\.|[^"\\\n])*"'), Category.string),
        Rule(_words('true', 'false', 'null'), Category.keyword),
        _NUMBER,
    ),
})


# Raw view: one line at a time, so no multi-line constructs.
LINE_RULES = MappingProxyType({
    'javascript': (
        Rule(re.compile(r'//.*$'), Category.comment),
        Rule(re.compile(r'"[^"]*?"|\'[^\']*?\''), Category.string),
        Rule(_words(
            'import', 'export', 'from', 'const', 'let', 'var', 'function', 'return', 'if',
            'else', 'for', 'while', 'class', 'new', 'default', 'true', 'false', 'null',
            'undefined', 'async', 'await', 'try', 'catch', 'throw', 'of', 'in', 'switch',
            'case', 'break', 'continue', 'this', 'typeof', 'instanceof', 'void', 'delete', 'yield',
        ), Category.keyword),
        _NUMBER,
    ),
    'json': (
        Rule(re.compile(r'("[^"]*?")\s*:'), Category.attr, group=1),
        Rule(re.compile(r':\s*("[^"]*?")'), Category.string, group=1),
        _NUMBER,
        Rule(_words('true', 'false', 'null'), Category.keyword),
    ),
    'yaml': (
        Rule(re.compile(r'#.*$'), Category.comment),
        Rule(re.compile(r'^(\s*\w[\w-]*):'), Category.attr, group=1),
    ),
    'dockerfile': (
        Rule(re.compile(r'#.*$'), Category.comment),
        Rule(re.compile(
            r'^(?:FROM|RUN|COPY|WORKDIR|EXPOSE|CMD|ENV|ARG|ENTRYPOINT|ADD|VOLUME|USER|LABEL'
            r'|ONBUILD|STOPSIGNAL|HEALTHCHECK|SHELL)\b'
        ), Category.keyword),
    ),
    'python': (
        Rule(re.compile(r'#.*$'), Category.comment),
        Rule(re.compile(r'"""[^"]*?"""|\'\'\'[^\']*?\'\'\'|"[^"]*?"|\'[^\']*?\''), Category.string),
        Rule(_words(
            'def', 'class', 'return', 'if', 'elif', 'else', 'for', 'while', 'import', 'from',
            'as', 'with', 'try', 'except', 'raise', 'in', 'not', 'and', 'or', 'is', 'None',
            'True', 'False', 'self', 'lambda', 'yield', 'pass', 'break', 'continue', 'finally',
            'global', 'async', 'await',
        ), Category.keyword),
    ),
    'bash': (
        Rule(re.compile(r'#.*$'), Category.comment),
        Rule(_words(
            'echo', 'for', 'do', 'done', 'if', 'then', 'fi', 'else', 'elif', 'in', 'function',
            'local', 'export', 'source', 'cd', 'ls', 'mkdir', 'rm', 'cp', 'mv', 'cat', 'grep',
            'awk', 'sed', 'chmod', 'chown', 'while', 'case', 'esac',
        ), Category.keyword),
    ),
    'css': (
        Rule(re.compile(r'/\*.*?\*/'), Category.comment),
        Rule(re.compile(r'[.#][\w-]+'), Category.title),
        Rule(re.compile(r'\b\d+(?:\.\d+)?(?:px|em|rem|vh|vw|ms|s|%)?'), Category.number),
    ),
    'html': (
        Rule(re.compile(r'</?[\w-]+'), Category.keyword),
        Rule(re.compile(r'\s[\w-]+=("[^"]*?")'), Category.string, group=1),
    ),
    'sql': (
        Rule(re.compile(r'--.*$'), Category.comment),
        Rule(_words(
            'SELECT', 'FROM', 'WHERE', 'INSERT', 'UPDATE', 'DELETE', 'CREATE', 'DROP', 'ALTER',
            'TABLE', 'INTO', 'VALUES', 'SET', 'JOIN', 'LEFT', 'RIGHT', 'INNER', 'OUTER', 'ON',
            'AND', 'OR', 'NOT', 'NULL', 'AS', 'ORDER', 'BY', 'GROUP', 'HAVING', 'LIMIT',
            'DISTINCT', 'UNION', 'INDEX', 'VIEW', 'BEGIN', 'COMMIT', 'ROLLBACK', 'IN', 'EXISTS',
            'BETWEEN', 'LIKE', 'IS', 'COUNT', 'SUM', 'AVG', 'MAX', 'MIN', 'CASE', 'WHEN',
            'THEN', 'ELSE', 'END', flags=re.IGNORECASE,
        ), Category.keyword),
    ),
})
