from dataclasses import dataclass, field
from typing import Dict, FrozenSet

@dataclass(frozen=True)
class ReaderConfig:
    """Configuration for the factory method reader."""
    factory_annotations: FrozenSet[str] = frozenset({'org.hamcrest.Factory'})
    universal_top_type: str = 'java.lang.Object'
    void_type: str = 'void'
    parameter_name_prefix: str = 'param'
    vararg_suffix: str = '...'
    source_encoding: str = 'utf-8'
    fallback_encoding: str = 'latin1'
    primitive_types: FrozenSet[str] = frozenset({
        'byte', 'short', 'int', 'long', 'float', 'double', 'boolean', 'char', 'void'
    })
    # Every public top-level type of java.lang (Java 21), which is imported on demand.
    java_lang_types: FrozenSet[str] = field(default_factory=lambda: frozenset({
        # interfaces
        'Appendable', 'AutoCloseable', 'CharSequence', 'Cloneable', 'Comparable', 'Iterable',
        'Readable', 'Runnable', 'ProcessHandle',
        # classes
        'Boolean', 'Byte', 'Character', 'Class', 'ClassLoader', 'ClassValue', 'Compiler',
        'Double', 'Enum', 'Float', 'InheritableThreadLocal', 'Integer', 'Long', 'Math',
        'Module', 'ModuleLayer', 'Number', 'Object', 'Package', 'Process', 'ProcessBuilder',
        'Record', 'Runtime', 'RuntimePermission', 'SecurityManager', 'Short', 'StackWalker',
        'StackTraceElement', 'StrictMath', 'String', 'StringBuffer', 'StringBuilder', 'System',
        'Thread', 'ThreadGroup', 'ThreadLocal', 'Throwable', 'Void',
        # exceptions
        'ArithmeticException', 'ArrayIndexOutOfBoundsException', 'ArrayStoreException',
        'ClassCastException', 'ClassNotFoundException', 'CloneNotSupportedException',
        'EnumConstantNotPresentException', 'Exception', 'IllegalAccessException',
        'IllegalArgumentException', 'IllegalCallerException', 'IllegalMonitorStateException',
        'IllegalStateException', 'IllegalThreadStateException', 'IndexOutOfBoundsException',
        'InstantiationException', 'InterruptedException', 'LayerInstantiationException',
        'MatchException', 'NegativeArraySizeException', 'NoSuchFieldException',
        'NoSuchMethodException', 'NullPointerException', 'NumberFormatException',
        'ReflectiveOperationException', 'RuntimeException', 'SecurityException',
        'StringIndexOutOfBoundsException', 'TypeNotPresentException',
        'UnsupportedOperationException', 'WrongThreadException',
        # errors
        'AbstractMethodError', 'AssertionError', 'BootstrapMethodError', 'ClassCircularityError',
        'ClassFormatError', 'Error', 'ExceptionInInitializerError', 'IllegalAccessError',
        'IncompatibleClassChangeError', 'InstantiationError', 'InternalError', 'LinkageError',
        'NoClassDefFoundError', 'NoSuchFieldError', 'NoSuchMethodError', 'OutOfMemoryError',
        'StackOverflowError', 'ThreadDeath', 'UnknownError', 'UnsatisfiedLinkError',
        'UnsupportedClassVersionError', 'VerifyError', 'VirtualMachineError',
        # annotations
        'Deprecated', 'FunctionalInterface', 'Override', 'SafeVarargs', 'SuppressWarnings',
    }))
    known_packages: Dict[str, FrozenSet[str]] = field(default_factory=lambda: {
        'java.util': frozenset({
            'List', 'Set', 'Map', 'Collection', 'ArrayList', 'LinkedList', 'HashSet',
            'TreeSet', 'HashMap', 'TreeMap', 'LinkedHashMap', 'Vector', 'Stack',
            'Queue', 'Deque', 'PriorityQueue', 'Collections', 'Arrays', 'Optional',
            'Iterator', 'ListIterator', 'Enumeration', 'Properties', 'Comparator',
            'Date', 'Calendar', 'GregorianCalendar', 'TimeZone', 'Locale',
            'Random', 'Scanner', 'StringTokenizer', 'Timer', 'TimerTask'
        }),
        'java.util.regex': frozenset({'Pattern', 'Matcher'}),
        'java.io': frozenset({
            'File', 'FileInputStream', 'FileOutputStream', 'FileReader', 'FileWriter',
            'BufferedReader', 'BufferedWriter', 'PrintWriter', 'InputStream',
            'OutputStream', 'Reader', 'Writer', 'IOException', 'FileNotFoundException',
            'ObjectInputStream', 'ObjectOutputStream', 'Serializable'
        }),
        'java.time': frozenset({
            'LocalDate', 'LocalTime', 'LocalDateTime', 'ZonedDateTime', 'Instant',
            'Duration', 'Period', 'DateTimeFormatter', 'ZoneId', 'OffsetDateTime',
            'Year', 'Month', 'DayOfWeek', 'MonthDay', 'YearMonth'
        }),
        'org.hamcrest': frozenset({
            'Matcher', 'BaseMatcher', 'TypeSafeMatcher', 'Factory', 'Description'
        }),
    })
