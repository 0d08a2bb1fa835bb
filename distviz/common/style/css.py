''' Style sheet for HTML reports '''

css = '''
body {
  font-family: sans-serif;
  font-size: 15px;
  line-height: 1.6;
  padding: 1em;
  margin: auto;
  max-width: 60em;
  color: #222;
}

img {
  max-width: 100%;
}

h1, h2, h3, h4 {
  font-family: sans-serif;
  line-height: 125%;
  margin-top: 1.5em;
  font-weight: normal;
}

h1 {
  font-size: 2em;
  color: #0e7490;
}

h2 {
  font-size: 1.6em;
}

h3 {
  font-size: 1.25em;
}

h4 {
  font-size: 1.1em;
  font-weight: bold;
}

table {
    margin: 10px 5px;
    border-collapse: collapse;
 }

th {
    background-color: #eee;
    font-weight: bold;
}

th, td {
    border: 1px solid lightgray;
    padding: .2em 1em;
    font-family: monospace;
}'''


css_dark = '''
body {
  color: #e5e7eb;
}

h1 {
  color: #22d3ee;
}

th {
    background-color: #374151;
}

th, td {
    border: 1px solid #6b7280;
}
'''
