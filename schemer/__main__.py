from schemer.repl import main

main()
