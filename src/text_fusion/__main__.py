from text_fusion.entry_points import main

main()
