"""
JavaScript repository scanner
"""
import os
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor

from funcgraph.config import ScannerConfig
from funcgraph.errors import FileTooLargeError, FuncGraphError
from funcgraph.extractors import EXTRACTORS
from funcgraph.parsers.javascript_parser import JavaScriptParser
from funcgraph.utils.language_detector import LanguageDetector


def analyze_source(source_code, variant='rich', filepath='<string>'):
    """
    Extract function records from a single source string

    Args:
        source_code: JavaScript source as str or bytes
        variant: 'rich' or 'signature'
        filepath: Path recorded on each record

    Returns:
        List of FunctionRecord objects
    """
    if isinstance(source_code, str):
        source_code = source_code.encode('utf-8')
    tree = JavaScriptParser().parse(source_code, filepath)
    return EXTRACTORS[variant]().extract(tree.root_node, source_code, filepath)


class RepositoryScanner:
    """Scan JavaScript files and collect their function records"""

    DEFAULT_IGNORE = {
        '.git', '.svn', 'node_modules', '__pycache__', '.venv', 'venv',
        'build', 'dist', '.idea', '.vscode', 'coverage', 'out',
        '.next', '.nuxt', 'bower_components', 'vendor',
    }

    def __init__(self, config=None, verbose=True):
        self.config = config or ScannerConfig()
        self.verbose = verbose
        self.parser = None
        self.extractor_class = EXTRACTORS[self.config.variant]
        self.results = {}
        self.records = []
        self.record_map = {}
        self.file_count = 0
        self.error_count = 0
        self.skipped_count = 0

        self.ignore_patterns = self.DEFAULT_IGNORE.copy()
        self.ignore_patterns.update(self.config.ignore_patterns)

        self._setup_parser()

    def _log(self, message):
        if self.verbose:
            print(message)

    def _setup_parser(self):
        """Initialize the JavaScript parser"""
        try:
            self.parser = JavaScriptParser()
            self._log("✓ JavaScript parser loaded")
        except Exception as e:
            self._log(f"✗ JavaScript parser failed: {e}")
            raise

    def should_ignore(self, path):
        """Check if a repository-relative path should be ignored"""
        basename = os.path.basename(path)

        if basename in self.ignore_patterns:
            return True

        parts = set(os.path.normpath(path).split(os.sep))
        if parts & self.ignore_patterns:
            return True

        if basename.startswith('.') and basename not in ('.', '..'):
            return True

        return False

    def scan_source(self, source_code, filepath='<string>'):
        """Parse and extract a single source buffer"""
        extractor = self._extract(source_code, filepath)
        self._merge(filepath, extractor)
        return extractor.records

    def scan_file(self, filepath, rel_path=None):
        """Scan a single file"""
        rel_path = rel_path or filepath
        extractor = self._extract(self._read(filepath), rel_path)
        self._merge(rel_path, extractor)
        return extractor.records

    def find_files(self, repo_path):
        """List (filepath, rel_path) pairs of JavaScript files in sorted order"""
        found = []
        for root, dirs, files in os.walk(repo_path):
            rel_root = os.path.relpath(root, repo_path)
            dirs[:] = sorted(d for d in dirs if not self.should_ignore(os.path.join(rel_root, d)))

            for filename in sorted(files):
                filepath = os.path.join(root, filename)
                rel_path = os.path.normpath(os.path.join(rel_root, filename))

                if self.should_ignore(rel_path):
                    continue
                if LanguageDetector.detect(filepath) != 'javascript':
                    continue

                found.append((filepath, rel_path))
        return found

    def scan_repository(self, repo_path):
        """Scan entire repository"""
        self._log(f"\nScanning repository: {repo_path}\n")

        files = self.find_files(repo_path)
        if self.config.workers > 1:
            # map() keeps submission order, so merging stays deterministic
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                outcomes = list(executor.map(lambda pair: self._try_extract(*pair), files))
        else:
            outcomes = [self._try_extract(filepath, rel_path) for filepath, rel_path in files]

        for rel_path, extractor, error in outcomes:
            if error is not None:
                self._log(f"    ✗ Error: {error}")
                self.error_count += 1
                continue
            self._merge(rel_path, extractor)

        self._print_scan_summary()
        return self.results

    def _try_extract(self, filepath, rel_path):
        self._log(f"  [javascript] Parsing: {rel_path}")
        try:
            return rel_path, self._extract(self._read(filepath), rel_path), None
        except (OSError, FuncGraphError) as e:
            return rel_path, None, e

    def _read(self, filepath):
        size = os.path.getsize(filepath)
        if size > self.config.max_file_size:
            raise FileTooLargeError(filepath, size, self.config.max_file_size)

        with open(filepath, 'rb') as f:
            return f.read()

    def _extract(self, source_code, filepath):
        if isinstance(source_code, str):
            source_code = source_code.encode('utf-8')

        tree = self.parser.parse(source_code, filepath)
        extractor = self.extractor_class()
        extractor.extract(tree.root_node, source_code, filepath)
        return extractor

    def _merge(self, rel_path, extractor):
        self.results[rel_path] = extractor.records
        self.records.extend(extractor.records)
        self.record_map.update(extractor.record_map)
        self.skipped_count += extractor.skipped
        self.file_count += 1

    def _print_scan_summary(self):
        """Print scan summary"""
        type_counts = defaultdict(int)
        for record in self.records:
            type_counts['method' if record.class_name else 'function'] += 1

        self._log(f"\n{'='*60}")
        self._log(f"✓ Successfully parsed: {self.file_count} files")
        self._log(f"✗ Errors: {self.error_count} files")
        self._log(f"✓ Total functions: {type_counts['function']}")
        self._log(f"✓ Total methods: {type_counts['method']}")
        if self.skipped_count:
            self._log(f"✗ Skipped malformed nodes: {self.skipped_count}")
        self._log(f"{'='*60}\n")

    def get_statistics(self):
        """Get repository statistics"""
        stats = {
            'total_files': self.file_count,
            'total_errors': self.error_count,
            'total_functions': len([r for r in self.records if not r.class_name]),
            'total_methods': len([r for r in self.records if r.class_name]),
            'total_calls': sum(len(r.calls) for r in self.records),
            'by_return_type': defaultdict(int),
            'files': defaultdict(lambda: {'functions': 0, 'methods': 0})
        }

        for record in self.records:
            if record.return_type:
                stats['by_return_type'][record.return_type] += 1
            stats['files'][record.filepath]['methods' if record.class_name else 'functions'] += 1

        return stats
