"""
Report printing utilities for function analysis
"""


class ReportPrinter:
    """Print various reports and summaries"""

    @staticmethod
    def print_summary(stats):
        """Print a summary of the scan"""
        print("\n" + "="*70)
        print("REPOSITORY SUMMARY")
        print("="*70)
        print(f"Total Files: {stats['total_files']}")
        print(f"Total Functions: {stats['total_functions']}")
        print(f"Total Methods: {stats['total_methods']}")
        print(f"Total Calls: {stats['total_calls']}")

        if stats['by_return_type']:
            print("\nBy Return Type:")
            for return_type, count in sorted(stats['by_return_type'].items()):
                print(f"  {return_type:14} {count}")

        print("\nTop 10 Files by Function Count:")
        sorted_files = sorted(
            stats['files'].items(),
            key=lambda x: x[1]['functions'] + x[1]['methods'],
            reverse=True
        )[:10]

        for filepath, counts in sorted_files:
            total = counts['functions'] + counts['methods']
            print(f"  {filepath}: {total} ({counts['methods']} methods)")

    @staticmethod
    def print_function_details(func_name, results):
        """Print details for a specific function"""
        if not results:
            print(f"\nNo function named '{func_name}' found.")
            return

        print(f"\n{'='*70}")
        print(f"FUNCTION DETAILS: {func_name}")
        print(f"{'='*70}")

        for record in results:
            print(f"\n{record.filepath}::{record.qualified_name}{record.parameters}")
            if record.class_name:
                print(f"  Class: {record.class_name}")
            if record.return_type:
                print(f"  Return Type: {record.return_type}")
            if record.start_position:
                print(f"  Lines: {record.start_position[0] + 1}-{record.end_position[0] + 1}")
            print(f"  Calls: {len(record.calls)} functions")
            for call in record.calls[:10]:
                print(f"    -> {call}")
            if len(record.calls) > 10:
                print(f"    ... and {len(record.calls) - 10} more")
            print(f"  Called by: {len(record.called_by)} functions")
            for caller in record.called_by[:10]:
                print(f"    <- {caller}")
            if len(record.called_by) > 10:
                print(f"    ... and {len(record.called_by) - 10} more")

    @staticmethod
    def print_class_details(class_name, methods):
        """Print the methods of a class"""
        if not methods:
            print(f"\nNo methods found for class '{class_name}'.")
            return

        print(f"\n{'='*70}")
        print(f"CLASS DETAILS: {class_name}")
        print(f"{'='*70}")
        print(f"Total Methods: {len(methods)}")

        for method in methods:
            return_type_str = f" -> {method.return_type}" if method.return_type else ""
            print(f"  • {method.name}{method.parameters}{return_type_str}")
            print(f"      Calls: {len(method.calls)} | Called by: {len(method.called_by)}")

    @staticmethod
    def print_records(results):
        """Print every record grouped by file"""
        for filepath, records in results.items():
            print(f"\n{filepath}:")
            for record in records:
                label = record.signature or f"{record.qualified_name}{record.parameters}"
                return_type_str = f" -> {record.return_type}" if record.return_type else ""
                print(f"  • {label}{return_type_str}")
                for call in record.calls:
                    print(f"      -> {call}")
