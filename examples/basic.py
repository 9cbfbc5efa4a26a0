from scstemmers import Stemmer

for algorithm in Stemmer.algorithms():
    stemmer = Stemmer.for_algorithm(algorithm)
    print(stemmer, stemmer.stem_line('Мој отац је певао песме.'))

stemmer = Stemmer.for_algorithm('ljubesic-pandzic')
print(stemmer.stem_line('Djevojčica je pjevala pjesme.'))
