"""MAEC 5.0 vocabularies.

Each vocabulary is a closed enumeration with one wire string per member.
"""

from __future__ import annotations

from enum import StrEnum


class AnalysisConclusionType(StrEnum):
    """Conclusions reached by a malware analysis."""

    BENIGN = "benign"
    MALICIOUS = "malicious"
    SUSPICIOUS = "suspicious"
    INDETERMINATE = "indeterminate"


class AnalysisEnvironment(StrEnum):
    """Properties of the environment an analysis ran in."""

    OPERATING_SYSTEM = "operating-system"
    HOST_VM = "host-vm"
    INSTALLED_SOFTWARE = "installed-software"


class AnalysisType(StrEnum):
    """Kinds of malware analysis."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    COMBINATION = "combination"


class ConfidenceMeasure(StrEnum):
    """Confidence levels aligned with the STIX high/medium/low vocabulary."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    NONE = "none"
    UNKNOWN = "unknown"


class ProcessorArchitecture(StrEnum):
    """Processor architectures a malware instance executes on."""

    X86 = "x86"
    X86_64 = "x86-64"
    IA_64 = "ia-64"
    POWERPC = "powerpc"
    ARM = "arm"
    ALPHA = "alpha"
    SPARC = "sparc"
    MIPS = "mips"


class ObfuscationMethod(StrEnum):
    """Binary obfuscation methods."""

    PACKING = "packing"
    CODE_ENCRYPTION = "code-encryption"
    DEAD_CODE_INSERTION = "dead-code-insertion"
    ENTRY_POINT_OBFUSCATION = "entry-point-obfuscation"
    IMPORT_ADDRESS_TABLE_OBFUSCATION = "import-address-table-obfuscation"
    INTERLEAVING_CODE = "interleaving-code"
    SYMBOLIC_OBFUSCATION = "symbolic-obfuscation"
    STRING_OBFUSCATION = "string-obfuscation"
    SUBROUTINE_REORDERING = "subroutine-reordering"
    CODE_TRANSPOSITION = "code-transposition"
    INSTRUCTION_SUBSTITUTION = "instruction-substitution"
    REGISTER_REASSIGNMENT = "register-reassignment"


class DeliveryVector(StrEnum):
    """Vectors used to distribute or deploy malware."""

    ACTIVE_ATTACKER = "active-attacker"
    AUTO_EXECUTING_MEDIA = "auto-executing-media"
    DOWNLOADER = "downloader"
    DROPPER = "dropper"
    EMAIL_ATTACHMENT = "email-attachment"
    EXPLOIT_KIT_LANDING_PAGE = "exploit-kit-landing-page"
    FAKE_WEBSITE = "fake-website"
    JANITOR_ATTACK = "janitor-attack"
    MALICIOUS_IFRAMES = "malicious-iframes"
    MALVERTISING = "malvertising"
    MEDIA_BAITING = "media-baiting"
    PHARMING = "pharming"
    PHISHING = "phishing"
    TROJANIZED_LINK = "trojanized-link"
    TROJANIZED_SOFTWARE = "trojanized-software"
    USB_CABLE_SYNCING = "usb-cable-syncing"
    WATERING_HOLE = "watering-hole"


class MalwareLabel(StrEnum):
    """Common malware labels."""

    ADWARE = "adware"
    APPENDER = "appender"
    BACKDOOR = "backdoor"
    BOOT_SECTOR_VIRUS = "boot-sector-virus"
    BOT = "bot"
    CAVITY_FILLER = "cavity-filler"
    CLICKER = "clicker"
    COMPANION_VIRUS = "companion-virus"
    DATA_DIDDLER = "data-diddler"
    DOWNLOADER = "downloader"
    DROPPER_FILE = "dropper-file"
    FILE_INFECTOR_VIRUS = "file-infector-virus"
    FORK_BOMB = "fork-bomb"
    GREYWARE = "greyware"
    IMPLANT = "implant"
    INFECTOR = "infector"
    JOKE_PROGRAM = "joke-program"
    KEYLOGGER = "keylogger"
    KLEPTOGRAPHIC_WORM = "kleptographic-worm"
    MACRO_VIRUS = "macro-virus"
    MASS_MAILER = "mass-mailer"
    METAMORPHIC_VIRUS = "metamorphic-virus"
    MID_INFECTOR = "mid-infector"
    MOBILE_CODE = "mobile-code"
    MULTIPARTITE_VIRUS = "multipartite-virus"
    PARENTAL_CONTROL = "parental-control"
    PASSWORD_STEALER = "password-stealer"
    POLYMORPHIC_VIRUS = "polymorphic-virus"
    PREMIUM_DIALER_OR_SMSER = "premium-dialer-or-smser"
    PREPENDER = "prepender"
    RANSOMWARE = "ransomware"
    ROGUE_ANTI_MALWARE = "rogue-anti-malware"
    ROOTKIT = "rootkit"
    SCAREWARE = "scareware"
    SECURITY_ASSESSMENT_TOOL = "security-assessment-tool"
    SHELLCODE = "shellcode"
    SPAGHETTI_PACKER = "spaghetti-packer"
    SPYWARE = "spyware"
    TRACKWARE = "trackware"
    TROJAN_HORSE = "trojan-horse"
    VIRUS = "virus"
    WEB_BUG = "web-bug"
    WIPER = "wiper"
    WORM = "worm"


class EntityAssociation(StrEnum):
    """Ways the members of a collection are associated."""

    FILE_SYSTEM_ENTITIES = "file-system-entities"
    NETWORK_ENTITIES = "network-entities"
    PROCESS_ENTITIES = "process-entities"
    MEMORY_ENTITIES = "memory-entities"
    IPC_ENTITIES = "ipc-entities"
    DEVICE_ENTITIES = "device-entities"
    REGISTRY_ENTITIES = "registry-entities"
    SERVICE_ENTITIES = "service-entities"
    POTENTIAL_INDICATORS = "potential-indicators"
    SAME_MALWARE_FAMILY = "same-malware-family"
    CLUSTERED_TOGETHER = "clustered-together"
    OBSERVED_TOGETHER = "observed-together"
    PART_OF_INTRUSION_SET = "part-of-intrusion-set"
    SAME_MALWARE_TOOLKIT = "same-malware-toolkit"


class BehaviorName(StrEnum):
    """Names of behaviors a malware instance can exhibit."""

    ACCESS_PREMIUM_SERVICE = "access-premium-service"
    AUTONOMOUS_REMOTE_INFECTION = "autonomous-remote-infection"
    BLOCK_SECURITY_WEBSITES = "block-security-websites"
    CAPTURE_CAMERA_INPUT = "capture-camera-input"
    CAPTURE_FILE_SYSTEM_DATA = "capture-file-system-data"
    CAPTURE_GPS_DATA = "capture-gps-data"
    CAPTURE_KEYBOARD_INPUT = "capture-keyboard-input"
    CAPTURE_MICROPHONE_INPUT = "capture-microphone-input"
    CAPTURE_MOUSE_INPUT = "capture-mouse-input"
    CAPTURE_PRINTER_OUTPUT = "capture-printer-output"
    CAPTURE_SYSTEM_NETWORK_TRAFFIC = "capture-system-network-traffic"
    CAPTURE_SYSTEM_SCREENSHOT = "capture-system-screenshot"
    CHECK_FOR_PAYLOAD = "check-for-payload"
    CHECK_LANGUAGE = "check-language"
    COMPROMISE_REMOTE_MACHINE = "compromise-remote-machine"
    CONTROL_LOCAL_MACHINE_VIA_REMOTE_COMMAND = "control-local-machine-via-remote-command"
    CRACK_PASSWORDS = "crack-passwords"
    DETECT_DEBUGGING = "detect-debugging"
    DETECT_EMULATOR = "detect-emulator"
    DETECT_SANDBOX_ENVIRONMENT = "detect-sandbox-environment"
    DETECT_VIRTUAL_MACHINE = "detect-virtual-machine"
    DETERMINE_HOST_IP_ADDRESS = "determine-host-ip-address"
    DISABLE_FIREWALL = "disable-firewall"
    DISABLE_OS_SECURITY_ALERTS = "disable-os-security-alerts"
    DISABLE_SECURITY_SERVICES = "disable-security-services"
    DISABLE_USER_ACCOUNT_CONTROL = "disable-user-account-control"
    ELEVATE_CPU_MODE = "elevate-cpu-mode"
    ENCRYPT_DATA = "encrypt-data"
    ENCRYPT_FILES = "encrypt-files"
    ENCRYPT_SELF = "encrypt-self"
    ERASE_DATA = "erase-data"
    EXFILTRATE_DATA_VIA_COVERT_CHANNEL = "exfiltrate-data-via-covert-channel"
    EXFILTRATE_DATA_VIA_NETWORK = "exfiltrate-data-via-network"
    EXFILTRATE_DATA_VIA_PHYSICAL_MEDIA = "exfiltrate-data-via-physical-media"
    FIND_INSTALLED_PROGRAMS = "find-installed-programs"
    GENERATE_C2_DOMAIN_NAMES = "generate-c2-domain-names"
    HIDE_FILE_SYSTEM_ARTIFACTS = "hide-file-system-artifacts"
    HIDE_NETWORK_TRAFFIC = "hide-network-traffic"
    HIDE_PROCESSES = "hide-processes"
    HIDE_REGISTRY_ARTIFACTS = "hide-registry-artifacts"
    IDENTIFY_OS = "identify-os"
    IMPERSONATE_USER = "impersonate-user"
    INSTALL_BACKDOOR = "install-backdoor"
    INSTALL_SECONDARY_MALWARE = "install-secondary-malware"
    INSTALL_SECONDARY_MODULE = "install-secondary-module"
    INTERCEPT_MANIPULATE_NETWORK_TRAFFIC = "intercept-manipulate-network-traffic"
    LOG_ACTIVITY = "log-activity"
    MAP_LOCAL_NETWORK = "map-local-network"
    MODIFY_SECURITY_SOFTWARE_CONFIGURATION = "modify-security-software-configuration"
    PERSIST_AFTER_SYSTEM_REBOOT = "persist-after-system-reboot"
    PREVENT_CONCURRENT_EXECUTION = "prevent-concurrent-execution"
    PREVENT_DEBUGGING = "prevent-debugging"
    PREVENT_FILE_DELETION = "prevent-file-deletion"
    REMOVE_SELF = "remove-self"
    REMOVE_SYSTEM_ARTIFACTS = "remove-system-artifacts"
    SEARCH_FOR_REMOTE_MACHINES = "search-for-remote-machines"
    SEND_BEACON = "send-beacon"
    SEND_EMAIL_MESSAGE = "send-email-message"
    SEND_SYSTEM_INFORMATION = "send-system-information"
    STOP_EXECUTION_OF_SECURITY_SOFTWARE = "stop-execution-of-security-software"
    TERMINATE_SECURITY_RELATED_PROCESSES = "terminate-security-related-processes"
    TEST_FOR_FIREWALL = "test-for-firewall"
    TEST_FOR_INTERNET_CONNECTIVITY = "test-for-internet-connectivity"
    TEST_FOR_PROXY = "test-for-proxy"
    UPDATE_CONFIGURATION = "update-configuration"


class MalwareActionName(StrEnum):
    """Names of low-level actions performed by malware."""

    ACCEPT_SOCKET_CONNECTION = "accept-socket-connection"
    ADD_USER = "add-user"
    ALLOCATE_VIRTUAL_MEMORY_IN_PROCESS = "allocate-virtual-memory-in-process"
    BIND_ADDRESS_TO_SOCKET = "bind-address-to-socket"
    CLOSE_REGISTRY_KEY = "close-registry-key"
    CLOSE_SOCKET = "close-socket"
    CONNECT_TO_FTP_SERVER = "connect-to-ftp-server"
    CONNECT_TO_IP = "connect-to-ip"
    CONNECT_TO_SOCKET = "connect-to-socket"
    CONNECT_TO_URL = "connect-to-url"
    COPY_FILE = "copy-file"
    CREATE_DIRECTORY = "create-directory"
    CREATE_FILE = "create-file"
    CREATE_MUTEX = "create-mutex"
    CREATE_NAMED_PIPE = "create-named-pipe"
    CREATE_PROCESS = "create-process"
    CREATE_REGISTRY_KEY = "create-registry-key"
    CREATE_REGISTRY_KEY_VALUE = "create-registry-key-value"
    CREATE_REMOTE_THREAD_IN_PROCESS = "create-remote-thread-in-process"
    CREATE_SERVICE = "create-service"
    CREATE_THREAD = "create-thread"
    DELETE_DIRECTORY = "delete-directory"
    DELETE_FILE = "delete-file"
    DELETE_REGISTRY_KEY = "delete-registry-key"
    DELETE_REGISTRY_KEY_VALUE = "delete-registry-key-value"
    DELETE_SERVICE = "delete-service"
    DOWNLOAD_FILE = "download-file"
    ENUMERATE_PROCESSES = "enumerate-processes"
    ENUMERATE_REGISTRY_KEY_SUBKEYS = "enumerate-registry-key-subkeys"
    ENUMERATE_SERVICES = "enumerate-services"
    FIND_FILE = "find-file"
    GET_HOST_BY_NAME = "get-host-by-name"
    GET_USERNAME = "get-username"
    KILL_PROCESS = "kill-process"
    LISTEN_ON_SOCKET = "listen-on-socket"
    LOAD_LIBRARY = "load-library"
    MODIFY_REGISTRY_KEY_VALUE = "modify-registry-key-value"
    MOVE_FILE = "move-file"
    OPEN_FILE = "open-file"
    OPEN_PROCESS = "open-process"
    OPEN_REGISTRY_KEY = "open-registry-key"
    READ_FROM_FILE = "read-from-file"
    READ_FROM_PROCESS_MEMORY = "read-from-process-memory"
    READ_REGISTRY_KEY_VALUE = "read-registry-key-value"
    RENAME_FILE = "rename-file"
    SEND_DNS_QUERY = "send-dns-query"
    SEND_EMAIL_MESSAGE = "send-email-message"
    SEND_HTTP_REQUEST = "send-http-request"
    SHUTDOWN_SYSTEM = "shutdown-system"
    SLEEP_PROCESS = "sleep-process"
    START_SERVICE = "start-service"
    STOP_SERVICE = "stop-service"
    UPLOAD_FILE = "upload-file"
    WRITE_TO_FILE = "write-to-file"
    WRITE_TO_PROCESS_MEMORY = "write-to-process-memory"


class CapabilityName(StrEnum):
    """High-level capabilities a malware instance may implement."""

    ANTI_BEHAVIORAL_ANALYSIS = "anti-behavioral-analysis"
    ANTI_CODE_ANALYSIS = "anti-code-analysis"
    ANTI_DETECTION = "anti-detection"
    ANTI_REMOVAL = "anti-removal"
    AVAILABILITY_VIOLATION = "availability-violation"
    COLLECTION = "collection"
    COMMAND_AND_CONTROL = "command-and-control"
    DATA_THEFT = "data-theft"
    DESTRUCTION = "destruction"
    DISCOVERY = "discovery"
    EXFILTRATION = "exfiltration"
    FRAUD = "fraud"
    INFECTION_PROPAGATION = "infection-propagation"
    INTEGRITY_VIOLATION = "integrity-violation"
    LATERAL_MOVEMENT = "lateral-movement"
    MACHINE_ACCESS_CONTROL = "machine-access-control"
    PERSISTENCE = "persistence"
    PRIVILEGE_ESCALATION = "privilege-escalation"
    SECONDARY_OPERATION = "secondary-operation"
    SECURITY_DEGRADATION = "security-degradation"


__all__ = [
    "AnalysisConclusionType",
    "AnalysisEnvironment",
    "AnalysisType",
    "BehaviorName",
    "CapabilityName",
    "ConfidenceMeasure",
    "DeliveryVector",
    "EntityAssociation",
    "MalwareActionName",
    "MalwareLabel",
    "ObfuscationMethod",
    "ProcessorArchitecture",
]
