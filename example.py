from dotenv import load_dotenv
load_dotenv()

from daemon_logging import LoggerContext, LoggerManager, Level

# Baseline: only errors for every subsystem
manager = LoggerManager(default_level=Level.ERROR, log_thread_ids=True)

worker = manager.create_logger(LoggerContext.WORKER, "job-1")
scheduler = manager.create_logger(LoggerContext.SCHEDULER)

# This will NOT be logged, DEBUG is not enabled for WORKER yet
worker.debug("Picked up job %d", 1)

manager.enable_logger_level(LoggerContext.WORKER, Level.DEBUG | Level.RAW)

# These WILL be logged, the existing logger sees the new level
worker.debug("Picked up job %d", 2)
worker.log_bytes(Level.RAW, "Job payload", b"\x01\x02\x03\x04")
scheduler.error("Queue overflow, dropping job %d", 3)

manager.destroy_logger(worker)
# scheduler is released here
manager.destroy()
