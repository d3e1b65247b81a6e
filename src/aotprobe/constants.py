"""Constants for aotprobe."""

# Properties set by the external launcher (decimal microseconds)
LAUNCHER_START_PROPERTY = "jarrunner.start.micros"
LAUNCHER_HANDOFF_PROPERTY = "jarrunner.beforejvm.micros"

# Runtime argument prefixes that carry the AOT cache path
AOT_USE_PREFIX = "-XX:AOTCache="
AOT_CREATE_PREFIX = "-XX:AOTCacheOutput="

MICROS_PER_MILLI = 1000

CONFIG_FILENAME = "aotprobe.toml"

# Phase and checkpoint names
IMPORT_CHECKPOINT = "import"
MAIN_START_CHECKPOINT = "main-start"
LIBRARY_INIT_PHASE = "library-init"
APPLICATION_WORK_PHASE = "application-work"
REPORT_PHASE = "report-generation"
