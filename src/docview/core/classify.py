"""Name-based text/binary classification and viewer file-type helpers"""

from pathlib import PurePath


TEXT_EXTENSIONS = frozenset({
    'md', 'txt', 'js', 'ts', 'jsx', 'tsx', 'mjs', 'cjs',
    'json', 'yaml', 'yml', 'toml', 'cfg', 'ini', 'conf',
    'env', 'gitignore', 'dockerignore', 'editorconfig',
    'prettierrc', 'eslintrc', 'babelrc',
    'html', 'htm', 'css', 'scss', 'less', 'xml', 'svg',
    'sh', 'bash', 'zsh', 'fish', 'bat', 'cmd', 'ps1',
    'py', 'rb', 'java', 'c', 'cpp', 'h', 'hpp', 'cs',
    'go', 'rs', 'php', 'sql', 'r', 'swift', 'kt',
    'makefile', 'dockerfile', 'log', 'csv', 'tsv',
    'properties', 'gradle', 'lock', 'map',
    'vue', 'svelte', 'astro',
})

KNOWN_TEXT_FILES = frozenset({
    'makefile', 'dockerfile', 'license', 'readme', 'changelog',
    'gemfile', 'rakefile', 'procfile', 'vagrantfile',
    '.gitignore', '.dockerignore', '.editorconfig', '.env',
    '.npmrc', '.yarnrc', '.nvmrc', '.prettierrc', '.eslintrc',
    '.babelrc', '.browserslistrc',
})

HIDDEN_NAMES = frozenset({
    'node_modules', '.git', '.svn', '.hg', '.DS_Store',
    'Thumbs.db', '.idea', '.vscode', '__pycache__',
    '.cache', '.npm', '.yarn', 'dist', 'build', '.next',
    '.nuxt', 'coverage', '.env.local', '.env.production',
})

MARKDOWN_EXTENSIONS = frozenset({'md', 'markdown', 'mdx'})


def _extension(base: str) -> str:
    """Return the text after the last '.' of a base name; '' for none or a bare dotfile."""
    stem, dot, ext = base.rpartition('.')
    if not dot or not stem:
        return ''
    return ext


def is_text_file(name: str) -> bool:
    """Return True if the file name marks a previewable text file. No content sniffing."""
    base = PurePath(name).name.lower()
    if base in KNOWN_TEXT_FILES:
        return True
    ext = _extension(base)
    if not ext:
        return False
    return ext in TEXT_EXTENSIONS


def is_hidden(name: str) -> bool:
    """Dotfiles and well-known tool/build directories are hidden by default."""
    return name.startswith('.') or name in HIDDEN_NAMES


def get_ext(name: str) -> str:
    """Return the viewer extension for a file name, used to pick a renderer."""
    base = PurePath(name).name
    if base in ('Dockerfile', 'dockerfile'):
        return 'dockerfile'
    if base in ('Makefile', 'makefile'):
        return 'makefile'
    if base in ('LICENSE', 'CHANGELOG', 'README'):
        return 'txt'
    _, dot, ext = base.rpartition('.')
    return ext.lower() if dot else ''


def is_markdown(ext: str) -> bool:
    return ext.lower() in MARKDOWN_EXTENSIONS
