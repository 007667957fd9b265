"""
Unified Sanskrit Transliterator
Line-oriented CLI and JSON API over the word-level converters
"""

import logging
import os
import platform
import sys
from typing import Callable, Dict, List, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from devanagari_synthesizer import romanized_to_devanagari
from devanagari_transliterator import decompose
from line_converter import convert_line
from script_converters import devanagari_to_gujarati, slp1_to_iast

# Load .env file for local development
load_dotenv()

__version__ = '0.1.0'
PROGRAM_NAME = 'uast'

DEFAULT_MODE = os.getenv('UAST_DEFAULT_MODE', 'd')

MODES: Dict[str, Dict] = {
    'd': {'name': 'uast-devanagari', 'description': 'UAST / IAST to Devanagari', 'convert': romanized_to_devanagari},
    'i': {'name': 'devanagari-iast', 'description': 'Devanagari to IAST', 'convert': decompose},
    'g': {'name': 'devanagari-gujarati', 'description': 'Devanagari to Gujarati', 'convert': devanagari_to_gujarati},
    's': {'name': 'slp1-iast', 'description': 'SLP1 to IAST', 'convert': slp1_to_iast},
}

USAGE = f"Usage: {PROGRAM_NAME} [{'|'.join(MODES)}]"

logger = logging.getLogger(__name__)

app = Flask(__name__)


class UnknownModeError(ValueError):
    """Raised for a conversion mode that is not in MODES"""

    def __init__(self, mode: str):
        super().__init__(f"Unknown mode '{mode}'. {USAGE}")
        self.mode = mode


def get_converter(mode: str) -> Callable[[str], str]:
    """
    Get the word-level converter for a mode

    Args:
        mode: One of the MODES keys

    Returns:
        Conversion function

    Raises:
        UnknownModeError: mode is not registered
    """
    if mode not in MODES:
        raise UnknownModeError(mode)
    return MODES[mode]['convert']


def transliterate(text: str, mode: str = 'd') -> str:
    """Convert every line of text with the converter for mode"""
    convert = get_converter(mode)
    return '\n'.join(convert_line(convert, line) for line in text.splitlines())


def version_string() -> str:
    return f"{PROGRAM_NAME} {__version__} ({platform.system().lower()} [{platform.machine()}])"


def _with_cors(response):
    response.headers.add('Access-Control-Allow-Origin', '*')
    return response


def _preflight():
    response = jsonify({'status': 'ok'})
    response.headers.add('Access-Control-Allow-Headers', 'Content-Type')
    response.headers.add('Access-Control-Allow-Methods', 'POST')
    return _with_cors(response)


def _request_data() -> Dict:
    """Body as JSON, then form fields, then raw text"""
    data = request.get_json(force=True, silent=True)

    if not data or not isinstance(data, dict):
        data = request.form.to_dict()

    if not data and request.data:
        data = {'text': request.data.decode('utf-8', errors='replace')}

    return data or {}


@app.route('/', methods=['GET'])
def index():
    return _with_cors(jsonify({
        'name': PROGRAM_NAME,
        'version': __version__,
        'endpoints': ['/api/modes', '/api/transliterate'],
    }))


@app.route('/api/modes', methods=['GET'])
def api_modes():
    """List available conversion modes"""
    modes = [
        {'mode': key, 'name': info['name'], 'description': info['description']}
        for key, info in MODES.items()
    ]
    return _with_cors(jsonify({'modes': modes, 'default': DEFAULT_MODE}))


@app.route('/api/transliterate', methods=['POST', 'OPTIONS'])
def api_transliterate():
    """API endpoint for transliteration"""
    if request.method == 'OPTIONS':
        return _preflight()

    data = _request_data()
    text = data.get('text', '')
    mode = str(data.get('mode') or DEFAULT_MODE)

    if not isinstance(text, str) or not text.strip():
        return _with_cors(jsonify({
            'success': False,
            'error': 'Please provide text to transliterate'
        })), 400

    try:
        output = transliterate(text, mode)
    except UnknownModeError as e:
        return _with_cors(jsonify({'success': False, 'error': str(e)})), 400
    except Exception as e:
        logger.exception("Transliteration failed for mode %s", mode)
        return _with_cors(jsonify({
            'success': False,
            'error': f'Transliteration error: {str(e)}'
        })), 500

    return _with_cors(jsonify({
        'success': True,
        'mode': mode,
        'input': text,
        'output': output,
    }))


def main(argv: Optional[List[str]] = None, stdin=None, stdout=None, stderr=None) -> int:
    """
    CLI entry point: convert stdin line by line

    Returns:
        Process exit status
    """
    args = sys.argv[1:] if argv is None else argv
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if len(args) > 1:
        print(f"Invalid number of arguments. {USAGE}", file=stderr)
        return 1

    mode = args[0] if args else DEFAULT_MODE

    if mode == '-v':
        print(version_string(), file=stdout)
        return 0

    if mode == '-h':
        print(USAGE, file=stdout)
        return 0

    try:
        convert = get_converter(mode)
    except UnknownModeError:
        print(USAGE, file=stderr)
        return 1

    for line in stdin:
        print(convert_line(convert, line), file=stdout)

    return 0


def serve():
    """Run the JSON API with Flask's server"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', '').lower() in ('1', 'true', 'yes')
    logger.info("Starting %s API on port %d", PROGRAM_NAME, port)
    app.run(host='0.0.0.0', port=port, debug=debug)


if __name__ == '__main__':
    if len(sys.argv) > 1 and sys.argv[1] == 'serve':
        serve()
    else:
        sys.exit(main())
