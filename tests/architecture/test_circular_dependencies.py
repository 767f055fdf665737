import os
import subprocess
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[2] / 'src'

# All modules to test in dependency order
MODULES = [
    # Independent modules (no internal deps)
    'stmtbuilder.exceptions',
    'stmtbuilder.utils',
    'stmtbuilder.dialect',

    # Pairs and SQL fragments
    'stmtbuilder.types',
    'stmtbuilder.sql',

    # Builder and options
    'stmtbuilder.builder',
    'stmtbuilder.options',

    # Main package
    'stmtbuilder',
]


def _import_in_fresh_interpreter(module):
    """Import a module in a new interpreter so no cached module hides a cycle."""
    env = dict(os.environ)
    env['PYTHONPATH'] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get('PYTHONPATH')]))
    return subprocess.run(
        [sys.executable, '-c', f'import importlib; importlib.import_module({module!r})'],
        capture_output=True, text=True, env=env, check=False,
    )


def test_circular_dependencies():
    """Test if modules can be imported without circular dependencies"""
    results = {}
    for module in MODULES:
        print(f'Checking {module}... ', end='')
        proc = _import_in_fresh_interpreter(module)
        if proc.returncode == 0:
            print('✓ Success')
            results[module] = True
        else:
            print(f'✗ Failed: {proc.stderr.strip().splitlines()[-1:]}')
            results[module] = False

    failures = [m for m, ok in results.items() if not ok]
    assert not failures, f'{len(failures)} modules failed circular dependency check: {failures}'


if __name__ == '__main__':
    __import__('pytest').main([__file__])
