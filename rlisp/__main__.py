from rlisp.main import main

main()
