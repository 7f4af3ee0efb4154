import reads_map.cli

reads_map.cli.main()
