import os
import tempfile

# Keep tool logs out of the repository while the server modules are imported
os.environ.setdefault("PTCG_MCP_LOG_DIR", tempfile.mkdtemp(prefix="ptcg_mcp_logs_"))
