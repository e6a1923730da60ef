from wgsl_plus.cli import main

main()
