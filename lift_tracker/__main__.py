from lift_tracker.cli import main

main()
