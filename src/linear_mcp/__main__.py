from linear_mcp.transports.stdio.main import run

run()
