from kingchain.app import main

main()
