from miniplot.demo import main

main()
