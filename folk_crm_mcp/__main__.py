from folk_crm_mcp.main import main

main()
