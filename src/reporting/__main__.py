from src.reporting.worked_examples import main

main()
